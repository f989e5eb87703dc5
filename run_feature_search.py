import argparse
import logging
import os

from Analysis.FeatureReduction import format_feature_values
from Analysis.MinimalSeparatingSets import format_separating_set
from Analysis.PhoneSelection import PhoneSelection
from Preprocessing.InventoryImporter import read_inventory_file
from Preprocessing.feature_matrix import MAJOR_CLASSES
from Preprocessing.feature_matrix import get_reference_matrix
from Utility.storage_config import DEFAULT_SESSION_PATH
from Utility.utils import load_session
from Utility.utils import save_session


def build_parser():
    parser = argparse.ArgumentParser(description='Find the features that single out a selection of phones')

    parser.add_argument('phones',
                        nargs='*',
                        help="Phones to select, e.g. b d g")

    parser.add_argument('--import',
                        dest="import_path",
                        type=str,
                        help="Phonology Assistant chart (.html) or plain list of phones to compare against.",
                        default=None)

    parser.add_argument('--limit_to_imported',
                        action="store_true",
                        help="Compare against the imported phones only instead of the whole reference inventory.",
                        default=False)

    parser.add_argument('--major_class',
                        choices=list(MAJOR_CLASSES.keys()),
                        help="Select a whole natural class instead of listing phones.",
                        default=None)

    parser.add_argument('--all',
                        action="store_true",
                        help="Show every minimal separating set instead of only the first one.",
                        default=False)

    parser.add_argument('--panphon',
                        action="store_true",
                        help="Take the feature values from panphon instead of the built-in table.",
                        default=False)

    parser.add_argument('--session',
                        type=str,
                        nargs="?",
                        const=DEFAULT_SESSION_PATH,
                        help=f"JSON file to restore the selection from (if it exists) and to store it to afterwards. Without a path {DEFAULT_SESSION_PATH} is used.",
                        default=None)

    parser.add_argument('--verbose',
                        action="store_true",
                        default=False)
    return parser


def print_report(selection, all_results):
    report = selection.report(all_results=all_results)
    print(f"Selected Phones ({len(selection.selected)}): {' '.join(selection.selected)}")
    print(f"Compared against {len(selection.universe)} phones")
    print(f"\nCommon Features:\n\t{format_feature_values(report.common) or '-'}")
    print(f"\nDistinctive Features:\n\t{format_feature_values(report.distinctive) or '-'}")
    print("\nMinimal Distinguishing Feature Sets:")
    if len(report.minimal_sets) == 0:
        print("\tNo minimal feature sets found (try selecting a different set).")
    for separating_set in report.minimal_sets:
        print(f"\t{format_separating_set(separating_set)}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.panphon:
        from Preprocessing.panphon_features import generate_panphon_feature_matrix

        matrix = generate_panphon_feature_matrix()
    else:
        matrix = get_reference_matrix()

    if args.session is not None and os.path.exists(args.session):
        try:
            selection = load_session(args.session, matrix)
        except ValueError as e:
            parser.error(str(e))
    else:
        selection = PhoneSelection(matrix)

    if args.import_path is not None:
        try:
            selection.set_import(read_inventory_file(args.import_path))
        except FileNotFoundError:
            parser.error(f"Could not find {args.import_path}")
        except ValueError as e:
            parser.error(str(e))
    if args.limit_to_imported:
        selection.set_limit_to_imported(True)

    if args.major_class is not None:
        selection.select_major_class(args.major_class)
    elif len(args.phones) > 0:
        unknown = [phone for phone in args.phones if phone not in selection.universe]
        if len(unknown) > 0:
            print(f"Not in the current inventory, ignoring: {' '.join(unknown)}")
        selection.select(args.phones)

    if len(selection.selected) == 0:
        parser.error("Nothing selected, list some phones or pick a --major_class")

    print_report(selection, all_results=args.all)

    if args.session is not None:
        save_session(selection, args.session)


if __name__ == '__main__':
    main()
