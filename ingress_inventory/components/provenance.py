from dataclasses import dataclass

from ingress_inventory.types import ItemID


@dataclass(frozen=True)
class Provenance:
    """Marks an item synthesized out of a container.

    Attributes:
        container_id: Id of the container the item was extracted from.
        container_type: Resource type of that container (``"CONTAINER"`` if
            the container did not declare one).
    """

    container_id: ItemID
    container_type: str
