"""Resource identifiers (``namespace:path``), used for the ``font`` field."""

from __future__ import annotations

from dataclasses import dataclass

from chat_component.errors import InvalidIdentifierError

__all__ = ["DEFAULT_NAMESPACE", "Identifier"]

DEFAULT_NAMESPACE = "minecraft"


@dataclass(frozen=True, slots=True)
class Identifier:
    """A namespaced resource location such as ``minecraft:uniform``.

    Two identifiers are equal when both namespace and path match, so a bare
    ``"uniform"`` parsed with the default namespace equals
    ``"minecraft:uniform"``.

    Raises:
        InvalidIdentifierError: On construction, if either half is empty or
            contains ``:``.
    """

    namespace: str
    path: str

    def __post_init__(self) -> None:
        if (
            not self.namespace
            or not self.path
            or ":" in self.namespace
            or ":" in self.path
        ):
            raise InvalidIdentifierError(f"{self.namespace}:{self.path}")

    @classmethod
    def parse(cls, value: str, default_namespace: str = DEFAULT_NAMESPACE) -> Identifier:
        """Parse ``namespace:path`` or a bare ``path``.

        A bare path, or one with an empty namespace (``":path"``), is placed
        in ``default_namespace``.

        Raises:
            InvalidIdentifierError: If the value holds more than one ``:``,
                the path is empty, or ``default_namespace`` is itself invalid.
        """
        namespace, sep, path = value.partition(":")
        if not sep:
            namespace, path = "", value
        return cls(namespace or default_namespace, path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"
