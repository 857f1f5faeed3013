from pathlib import Path


class PathUtils:
    """
    A central utility for retrieving the paths the auditor reads from.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed `a11y_auditor` package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"
