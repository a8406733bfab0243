"""Naming-case conversions for test and directory names."""


def hyphen_to_underscore(name: str) -> str:
    """Convert lower-hyphen-case to lower_underscore_case."""
    return name.replace("-", "_")


def hyphen_to_upper_camel(name: str) -> str:
    """Convert lower-hyphen-case to UpperCamelCase.

    Each hyphen-separated word keeps its first character upper-cased and
    the rest lower-cased, e.g. ``number-parser`` -> ``NumberParser`` and
    ``test-0`` -> ``Test0``. Empty words disappear.
    """
    return "".join(word[:1].upper() + word[1:].lower() for word in name.split("-"))


def package_to_path(package: str) -> str:
    """Convert a dotted Java package to a slash-delimited path."""
    return package.replace(".", "/")
