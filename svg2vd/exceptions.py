class ConversionException(Exception):
    """Base class for every error raised while converting a single source file.

    Args:
        source (str): name of the file being converted, or "<string>" for in-memory input
        message (str): human readable description of the problem
    """

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class SourceUnreadableException(ConversionException):
    pass


class MalformedMarkupException(ConversionException):
    pass


class NotExpectedRootException(ConversionException):
    def __init__(self, source: str, tag: str):
        super().__init__(source, f"root tag is <{tag}>, expected <svg>")
        self.tag = tag


class InvalidDimensionsException(ConversionException):
    def __init__(self, source: str, message: str = "invalid dimensions in <svg> tag"):
        super().__init__(source, message)


class UnsupportedConstructException(ConversionException):
    """A node, attribute or value outside of the supported subset.

    These are recoverable: the converter drops the construct, keeps the exception as a
    diagnostic and carries on, unless it runs in strict mode.
    """

    def __init__(self, source: str, tag: str, message: str, attribute: str | None = None):
        super().__init__(source, message)
        self.tag = tag
        self.attribute = attribute


class NumericParseException(ConversionException):
    def __init__(self, source: str, path_data: str, message: str):
        super().__init__(source, f'{message} in path data "{path_data}"')
        self.path_data = path_data


class OutputWriteException(ConversionException):
    pass


class ImageConversionException(ConversionException):
    pass
