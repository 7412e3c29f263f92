from typing import Dict, Iterable, List

from polyglot.core.exceptions import FlowAlreadyRegisteredError, FlowNotFoundError

from .base import FlowDefinition


class FlowRegistry:
    """
    Holds the flow definitions by name. Populated once at start-up and only read afterwards.
    """

    def __init__(self, definitions: Iterable[FlowDefinition] = ()):
        self._flows: Dict[str, FlowDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: FlowDefinition) -> None:
        if definition.name in self._flows:
            raise FlowAlreadyRegisteredError(definition.name)
        self._flows[definition.name] = definition

    def get(self, name: str) -> FlowDefinition:
        try:
            return self._flows[name]
        except KeyError:
            raise FlowNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._flows)

    def __contains__(self, name: object) -> bool:
        return name in self._flows

    def __len__(self) -> int:
        return len(self._flows)
