"""
Adapter: XML user repository.

Implements the UserRepository port.
Streams ``<row>`` elements from an XML dataset file so that a consumer
that stops early never forces the rest of the file to be parsed.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from usersearch.domain.search.entities import UserRow
from usersearch.domain.search.errors import DatasetError, MalformedRecordError
from usersearch.domain.search.ports import UserRepository

logger = logging.getLogger(__name__)

ROW_TAG = "row"
ROW_FIELDS = ("id", "first_name", "last_name", "age", "about", "gender")


class XmlUserRepository(UserRepository):
    """Concrete adapter reading users from an XML file.

    Expected layout::

        <root>
          <row>
            <id>0</id><first_name>..</first_name><last_name>..</last_name>
            <age>22</age><about>..</about><gender>male</gender>
          </row>
          ...
        </root>

    The file is opened anew on every scan; nothing is cached between calls.
    """

    def __init__(self, dataset_path: Path) -> None:
        """Initialize the repository.

        Args:
            dataset_path: Location of the XML dataset file.
        """
        self._dataset_path = Path(dataset_path)

    @property
    def dataset_path(self) -> Path:
        return self._dataset_path

    def iter_rows(self) -> Iterator[UserRow]:
        """Yield dataset rows in file order.

        Raises:
            DatasetError: If the file cannot be opened or is not valid XML.
            MalformedRecordError: If a row lacks one of the expected elements.
        """
        try:
            with self._dataset_path.open("rb") as source:
                for _event, element in ET.iterparse(source, events=("end",)):
                    if element.tag != ROW_TAG:
                        continue
                    row = _element_to_row(element)
                    element.clear()
                    yield row
        except ET.ParseError as exc:
            logger.error("Could not parse dataset %s: %s", self._dataset_path, exc)
            raise DatasetError(
                f"couldn't parse file {self._dataset_path}: {exc}"
            ) from exc
        except OSError as exc:
            logger.error("Could not read dataset %s: %s", self._dataset_path, exc)
            raise DatasetError(
                f"couldn't read file {self._dataset_path}: {exc}"
            ) from exc


def _element_to_row(element: ET.Element) -> UserRow:
    values: dict[str, str] = {}
    for name in ROW_FIELDS:
        text = element.findtext(name)
        if text is None:
            raise MalformedRecordError(name, None)
        values[name] = text
    return UserRow(**values)
