"""
xmlimg ingest layer.

Selects the input XML files and drives the extraction pipeline over them.

Usage:
    from xmlimg.ingest import run
    from xmlimg.runtime import get_extract_config

    result = run(get_extract_config(input_files=["catalog.xml"]))
"""

from .pipeline import FileResult, RunResult, decode_node, process_file, run
from .sources import XML_SUFFIX, list_xml_files, select_input_files, split_filenames

__all__ = [
    # Sources
    "XML_SUFFIX",
    "split_filenames",
    "list_xml_files",
    "select_input_files",
    # Pipeline
    "FileResult",
    "RunResult",
    "decode_node",
    "process_file",
    "run",
]
