"""Exceptions raised while converting a verification key into a verifier contract."""


class HuffvError(ValueError):
    """Base class for every error raised by huffv."""


class MalformedFieldElement(HuffvError):
    """A field element is not a valid non-negative base-10 integer.

    Attributes:
        field (str | None): label of the verification key entry being encoded, if known.
        value: the offending input.
    """

    def __init__(self, value, field: str | None = None):
        self.value = value
        self.field = field
        msg = f"Malformed field element: {value!r} is not a non-negative decimal integer"
        if field is not None:
            msg += f" (field: {field})"
        super().__init__(msg)


class FieldElementOverflow(HuffvError):
    """A field element does not fit in 32 bytes.

    Attributes:
        field (str | None): label of the verification key entry being encoded, if known.
        value (str): the offending decimal string.
    """

    def __init__(self, value: str, field: str | None = None):
        self.value = value
        self.field = field
        msg = f"Field element overflow: {value} does not fit in 32 bytes"
        if field is not None:
            msg += f" (field: {field})"
        super().__init__(msg)


class EmptyVerificationKey(HuffvError):
    """The verification key is missing a required entry or coordinate."""

    def __init__(self, field: str, detail: str = "missing"):
        self.field = field
        super().__init__(f"Verification key entry {field} is {detail}")


class TooManyPublicInputs(HuffvError):
    """The verification key has more public inputs than the verifier has slots for."""

    def __init__(self, ic_count: int, max_public_inputs: int):
        self.ic_count = ic_count
        self.max_public_inputs = max_public_inputs
        msg = f"Too many public inputs: {ic_count - 1} public inputs ({ic_count} IC points), "
        msg += f"at most {max_public_inputs} are supported"
        super().__init__(msg)


class UnresolvedPlaceholder(HuffvError):
    """Placeholders are still present in the template after substitution."""

    def __init__(self, placeholders: list[str]):
        self.placeholders = placeholders
        super().__init__(f"Unresolved placeholders in template: {', '.join(placeholders)}")


class ConfigurationError(HuffvError):
    """The configuration file is invalid."""
