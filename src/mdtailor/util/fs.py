"""Filesystem helpers: document discovery and route-relative resolution"""

from pathlib import Path
from typing import Optional

from mdtailor.core.models import RouteConfig


MD_EXTENSIONS = ('.mdx', '.md')     # resolution order


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def resolve_document(work_dir: Path, route: RouteConfig, name: str) -> Optional[Path]:
    """Return work_dir/<route folder>/<name>.mdx (or .md) if it exists."""
    folder = Path(work_dir) / route.folder
    for ext in MD_EXTENSIONS:
        candidate = folder / f"{name}{ext}"
        if candidate.is_file():
            return candidate
    return None
