import logging

import gradio as gr

from Analysis.FeatureReduction import format_feature_values
from Analysis.MinimalSeparatingSets import format_separating_set
from Analysis.PhoneSelection import PhoneSelection
from Preprocessing.InventoryImporter import read_inventory_file
from Preprocessing.feature_matrix import FEATURES
from Preprocessing.feature_matrix import MAJOR_CLASSES
from Preprocessing.feature_matrix import get_reference_matrix


class PhonologyWebUI:

    def __init__(self, matrix=None, title="Phonetics Feature Explorer", article=""):
        self.matrix = get_reference_matrix() if matrix is None else matrix
        self.iface = gr.Interface(fn=self.analyse,
                                  inputs=[gr.CheckboxGroup(choices=PhoneSelection(self.matrix).phone_choices(),
                                                           label="Phones"),
                                          gr.Dropdown(["", *MAJOR_CLASSES.keys()],
                                                      type="value",
                                                      value="",
                                                      label="Major Classes (replaces the phones ticked above)"),
                                          gr.File(type="filepath",
                                                  file_types=[".html", ".htm", ".txt"],
                                                  label="Imported inventory (Phonology Assistant chart or list of phones)"),
                                          gr.Checkbox(value=False, label="Limit to imported inventory"),
                                          gr.Checkbox(value=True, label="Show all minimal sets")],
                                  outputs=[gr.Textbox(label="Common Features"),
                                           gr.Textbox(label="Distinctive Features"),
                                           gr.Textbox(label="Minimal Distinguishing Feature Sets"),
                                           gr.Dataframe(headers=["Phone", *FEATURES], label="Feature Matrix")],
                                  title=title,
                                  live=True,
                                  flagging_mode="never",
                                  article=article)

    def launch(self, **kwargs):
        self.iface.launch(**kwargs)

    def build_selection(self, phones, major_class, inventory_path, limit_to_imported):
        selection = PhoneSelection(self.matrix, limit_to_imported=limit_to_imported)
        if inventory_path:
            try:
                selection.set_import(read_inventory_file(inventory_path))
            except ValueError as e:
                raise gr.Error(str(e))
        if major_class:
            selection.select_major_class(major_class)
        else:
            selection.select(phones or [])
        return selection

    def analyse(self, phones, major_class, inventory_path, limit_to_imported, show_all):
        selection = self.build_selection(phones, major_class, inventory_path, limit_to_imported)
        if len(selection.selected) == 0:
            return "", "", "", []
        report = selection.report(all_results=show_all)
        if len(report.minimal_sets) == 0:
            minimal_sets = "No minimal feature sets found (try selecting a different set)."
        else:
            minimal_sets = "\n".join(format_separating_set(separating_set) for separating_set in report.minimal_sets)
        return (format_feature_values(report.common),
                format_feature_values(report.distinctive),
                minimal_sets,
                selection.feature_table())


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    PhonologyWebUI().launch()
