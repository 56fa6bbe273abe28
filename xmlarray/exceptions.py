"""Exception classes for xmlarray."""


class XmlArrayError(Exception):
    """Base exception for all xmlarray errors."""


class NamingError(XmlArrayError):
    """Raised when an element or attribute name is not a legal XML name.

    The whole conversion is aborted; no partial document is returned.

    Attributes:
        name: The offending tag or attribute name
        node_name: Name of the element that contains it
        kind: Either "tag" or "attribute"
    """

    def __init__(self, name: str, node_name: str, kind: str = "tag"):
        super().__init__(
            f"Illegal character in {kind} name. {kind}: {name} in node: {node_name}"
        )
        self.name = name
        self.node_name = node_name
        self.kind = kind


class XmlParseError(XmlArrayError):
    """Raised when input text cannot be parsed into an XML document.

    Attributes:
        message: Human-readable error description
        raw_input: The text that failed to parse (optional)
    """

    def __init__(self, message: str, raw_input: str | bytes | None = None):
        super().__init__(message)
        self.raw_input = raw_input


class InputTypeError(XmlArrayError, TypeError):
    """Raised when the XML input is neither text nor a parsed document."""


class ContentError(XmlArrayError, ValueError):
    """Raised when node content cannot be written as XML.

    Attributes:
        node_name: Name of the element whose content is rejected
    """

    def __init__(self, message: str, node_name: str):
        super().__init__(message)
        self.node_name = node_name
