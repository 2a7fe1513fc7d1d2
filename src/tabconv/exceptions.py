#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tabconv library.

This module defines the exception classes raised by the conversion
pipelines, parsers and renderers. Every exception carries a human-readable
message and, where applicable, the original exception that caused it.

Exception Hierarchy
-------------------
- TabconvError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - InputNotFoundError (input path doesn't exist)

  - FormatError (unsupported/unknown formats)
    - UnsupportedFormatError (format not available for a pipeline)

  - ParsingError (malformed delimited text or workbook content)

  - RenderingError (output generation failures)
    - SerializationError (text encoder rejected the value tree)
    - OutputWriteError (directory creation or file write failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class TabconvError(Exception):
    """Base exception class for all tabconv-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TabconvError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(TabconvError):
    """Base exception for file access errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputNotFoundError(FileError):
    """Exception raised when an input file does not exist.

    The check happens before any parsing is attempted.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input not found error."""
        if message is None:
            message = f"Input file not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(TabconvError):
    """Exception raised when a requested output format cannot be used.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        Formats that are accepted in this context

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Output format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class UnsupportedFormatError(FormatError):
    """Exception raised when a pipeline is asked for a format it cannot produce.

    The CSV pipeline emits a single array of records and therefore only
    accepts JSON, YAML and TOML; requesting CSV or Markdown raises this error
    before any file is read or written.

    Parameters
    ----------
    format_type : str
        The rejected format name
    pipeline : str
        Name of the pipeline that rejected the format
    supported_formats : list[str], optional
        Formats the pipeline does accept

    """

    def __init__(
        self,
        format_type: str,
        pipeline: str,
        supported_formats: list[str] | None = None,
        message: str | None = None,
    ):
        """Initialize the unsupported format error."""
        if message is None:
            message = f"Format '{format_type}' is not supported by the {pipeline} pipeline"
            if supported_formats:
                message += f" (supported: {', '.join(supported_formats)})"
        super().__init__(message, format_type=format_type, supported_formats=supported_formats)
        self.pipeline = pipeline


class ParsingError(TabconvError):
    """Exception raised when input parsing fails.

    Covers malformed delimited text, undecodable bytes and workbooks that
    cannot be opened.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(TabconvError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class SerializationError(RenderingError):
    """Exception raised when a text encoder rejects the record tree.

    Parameters
    ----------
    format_name : str
        Name of the output format being produced
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The encoder exception

    """

    def __init__(self, format_name: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the serialization error."""
        if message is None:
            message = f"Failed to render {format_name.upper()}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="serialize", original_error=original_error)
        self.format_name = format_name


class OutputWriteError(RenderingError):
    """Exception raised when writing output fails.

    Parameters
    ----------
    file_path : str
        Path to the output file or directory that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
            if original_error is not None:
                message += f" ({original_error})"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(TabconvError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError raised while checking

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} format requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} format has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error


__all__ = [
    "TabconvError",
    "ValidationError",
    "FileError",
    "InputNotFoundError",
    "FormatError",
    "UnsupportedFormatError",
    "ParsingError",
    "RenderingError",
    "SerializationError",
    "OutputWriteError",
    "DependencyError",
]
