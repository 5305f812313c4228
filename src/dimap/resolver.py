"""
Resolution of argument expressions to concrete argument values.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .expressions import ArgumentExpression, ExpressionKind
from .keys import substitute_qualifier

if TYPE_CHECKING:
    from .container import Container


class ArgumentExpressionResolver:
    """
    Turns argument expressions into values for one element creation.

    The resolver is bound to the container that references are looked up in
    and to the qualifier the element was requested with.
    """

    def __init__(self, container: Container, qualifier: str | None):
        self._container = container
        self._qualifier = qualifier

    @property
    def container(self) -> Container:
        return self._container

    @property
    def qualifier(self) -> str | None:
        return self._qualifier

    def resolve(self, expression: Any) -> Any:
        """
        Resolve one argument expression.

        Args:
            expression: A raw expression from an element definition, or an
                already parsed ArgumentExpression

        Returns:
            The qualifier for "$", the shared element for "@key", a new private
            element for "#key", and the expression itself for anything else.
            A trailing ".$" in a referenced key is replaced by the qualifier.
        """
        if isinstance(expression, ArgumentExpression):
            parsed = expression
        else:
            parsed = ArgumentExpression.parse(expression)

        if parsed.kind is ExpressionKind.QUALIFIER:
            return self._qualifier

        if parsed.kind is ExpressionKind.SHARED_REFERENCE:
            return self._container.get_shared_element(self.referenced_key(parsed))

        if parsed.kind is ExpressionKind.PRIVATE_REFERENCE:
            return self._container.create_private_element(self.referenced_key(parsed))

        return parsed.value

    def resolve_all(self, expressions: Iterable[Any]) -> list[Any]:
        return [self.resolve(expression) for expression in expressions]

    def referenced_key(self, expression: ArgumentExpression) -> str:
        """Concrete element key referenced by a shared or private reference expression."""
        return substitute_qualifier(expression.value, self._qualifier)
