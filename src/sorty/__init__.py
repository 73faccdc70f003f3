from .errors import SortyError, PathNotFound, TraversalFailure, EntryUnreadable
from .scanner import Scanner, ScanResult, scan
from .settings import ScanSettings
from .pipeline import Collection, DuplicateGroup, collect_files, group_by_size, group_by_content
from .utils.hashing import HashAlgorithm, compute_digest
