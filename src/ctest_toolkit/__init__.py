"""Top-level package for the C-Test toolkit.

Provides subpackages:
- ctest_toolkit.core – C-Test data models (tokens and documents)
- ctest_toolkit.preprocessing – annotation, exclusion rules and gap index finders
- ctest_toolkit.gapscheme – gap selection, gap index estimation and regapping
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
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("ctest_toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()

from .core.models import CTestObject, CTestToken, ArgumentError
from .preprocessing import InitializationError, CTestResourceProvider
from .gapscheme import CTestGenerator, GeneratorConfig, update_gaps

__all__: list[str] = [
    "__version__",
    "CTestObject",
    "CTestToken",
    "ArgumentError",
    "InitializationError",
    "CTestResourceProvider",
    "CTestGenerator",
    "GeneratorConfig",
    "update_gaps",
]
