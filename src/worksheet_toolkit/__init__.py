"""Top-level package for the Worksheet Toolkit.

Provides subpackages:
- worksheet_toolkit.parser - worksheet text parser (text -> typed questions)
- worksheet_toolkit.extraction - PDF/DOCX/TXT text extraction
- worksheet_toolkit.editor - question editing helpers
- worksheet_toolkit.core - question models, schema and serialization
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("worksheet-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
