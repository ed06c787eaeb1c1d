#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2godoc library.

This module defines specialized exception classes for the error conditions
that can occur while turning Markdown into Go package documentation. These
exceptions provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Md2GodocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)
    - PackageNameError (invalid or uninferrable Go package name)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (Markdown parsing failures)

  - RenderingError (output generation failures)
    - UnsupportedNodeKindError (AST node the renderer has no rule for)
    - OutputWriteError (file write failures)

  - DependencyError (missing packages or executables)

"""

from typing import Any


class Md2GodocError(Exception):
    """Base exception class for all md2godoc-specific errors.

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


class ValidationError(Md2GodocError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing ``MarkdownParserOptions`` to the Go doc renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class PackageNameError(ValidationError):
    """Exception raised when a Go package name is invalid or cannot be inferred.

    Parameters
    ----------
    message : str
        Description of the problem
    package_name : str, optional
        The offending package name, if one was given
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, package_name: str | None = None, original_error: Exception | None = None):
        """Initialize the package name error."""
        super().__init__(
            message, parameter_name="package_name", parameter_value=package_name, original_error=original_error
        )


class FileError(Md2GodocError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the file that caused the error
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with optional file path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file does not exist.

    Parameters
    ----------
    file_path : str
        Path to the missing file
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Md2GodocError):
    """Exception raised when Markdown input cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred (e.g. "frontmatter")
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2GodocError):
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


class UnsupportedNodeKindError(RenderingError):
    """Exception raised when the renderer meets a node kind it has no rule for.

    This is fatal for the whole render: the partially built output is
    discarded and nothing is written.

    Parameters
    ----------
    node_type : str
        Class name of the offending node
    message : str, optional
        Custom error message

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the unsupported node kind error."""
        if message is None:
            message = f"Unknown node type {node_type}"
        super().__init__(message, rendering_stage="traversal")
        self.node_type = node_type


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Md2GodocError):
    """Exception raised when a required package or executable is missing.

    Parameters
    ----------
    converter_name : str
        Component that needs the dependency
    missing_packages : list of tuple[str, str]
        (package name, version spec) pairs that are missing
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error."""
        if message is None:
            names = ", ".join(f"{name}{spec}" for name, spec in missing_packages)
            message = f"{converter_name} requires missing dependencies: {names}"
        super().__init__(message, original_error=original_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
