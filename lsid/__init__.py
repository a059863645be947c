"""lsid - list file metadata and content identifiers."""
