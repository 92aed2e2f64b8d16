"""
Value Object: resultado parcial
Carrega os itens obtidos e os identificadores pulados com o motivo da falha
"""
from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class SkippedItem:
    """Identificador pulado (ano, período) e o motivo"""
    identifier: Union[int, str]
    reason: str

    def to_api_response(self) -> Dict[str, Union[int, str]]:
        return {'identifier': self.identifier, 'reason': self.reason}


@dataclass
class PartialResult(Generic[T]):
    """
    Resultado que distingue "todos os dados presentes" de "alguns itens pulados"

    Attributes:
        items: Itens calculados, na ordem solicitada
        skipped: Itens pulados com motivo
    """
    items: List[T] = field(default_factory=list)
    skipped: List[SkippedItem] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.skipped

    def add(self, item: T) -> None:
        self.items.append(item)

    def skip(self, identifier: Union[int, str], reason: str) -> None:
        self.skipped.append(SkippedItem(identifier=identifier, reason=reason))

    @property
    def skipped_identifiers(self) -> List[Union[int, str]]:
        return [s.identifier for s in self.skipped]
