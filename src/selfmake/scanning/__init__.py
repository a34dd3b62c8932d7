from selfmake.scanning.directive import ScanState, scan_line
from selfmake.scanning.extractor import IncludeExtractor, extract_includes
from selfmake.scanning.tree_index import TreeIndexer, index_tree

__all__ = [
    'IncludeExtractor',
    'ScanState',
    'TreeIndexer',
    'extract_includes',
    'index_tree',
    'scan_line',
]
