import json
import os

from Analysis.PhoneSelection import PhoneSelection


def load_json_from_path(path):
    with open(path, "r", encoding="utf8") as f:
        obj = json.loads(f.read())

    return obj


def save_json_to_path(obj, path):
    directory = os.path.dirname(path)
    if directory != "":
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf8") as f:
        f.write(json.dumps(obj, ensure_ascii=False, indent=2))


def save_session(selection, path):
    save_json_to_path(selection.to_dict(), path)


def load_session(path, matrix):
    """
    Restores a stored selection against the given feature
    matrix. Phones that are no longer in the matrix are
    dropped on the way.
    """
    try:
        state = load_json_from_path(path)
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} does not contain a stored selection: {e}")
    return PhoneSelection.from_dict(state, matrix)
