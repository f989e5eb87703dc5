from typing import List

from setuptools import find_namespace_packages
from setuptools import setup


install_requires: List[str] = ["panphon", "gradio"]

setup(name="phonology_explorer",
      version="0.0.1",
      packages=find_namespace_packages(include=["Analysis", "Preprocessing", "Utility"]),
      py_modules=["run_feature_search", "run_gradio_demo"],
      python_requires=">=3.8",
      install_requires=install_requires,
      extras_require={"test": ["pytest"]}, )
