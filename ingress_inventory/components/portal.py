from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PortalCoupler:
    """Portal key payload.

    Attributes:
        portal_guid: Identifier of the portal the key opens.
        portal_location: Hex encoded ``"latE6,lonE6"`` pair (see
            :func:`ingress_inventory.utils.geo.decode_location`).
        portal_title: Portal name, used as the key's title.
        portal_address: Street address shown on key cards.
    """

    portal_guid: Optional[str] = None
    portal_location: Optional[str] = None
    portal_title: Optional[str] = None
    portal_address: Optional[str] = None
