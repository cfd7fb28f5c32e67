"""Port interfaces the configuration core depends on.

Ports define the contracts of external collaborators. Adapters live in
infrastructure packages or in test fixtures.
"""

from galen.foundation.domain.ports.page_element import PageElement
from galen.foundation.domain.ports.property_source import PropertySource

__all__ = ["PageElement", "PropertySource"]
