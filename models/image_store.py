"""Named-image repository used by the scripting layer."""

import logging
from typing import Dict, Iterator, List

from models.errors import ImageNotFoundError
from models.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class ImageStore:
    """Maps names to raster buffers. Not thread-safe."""

    def __init__(self):
        self._images: Dict[str, RasterBuffer] = {}

    def put(self, name: str, buffer: RasterBuffer) -> RasterBuffer:
        stored = buffer if buffer.name == name else buffer.with_name(name)
        if name in self._images:
            logger.debug("Replacing image '%s'", name)
        self._images[name] = stored
        return stored

    def get(self, name: str) -> RasterBuffer:
        try:
            return self._images[name]
        except KeyError:
            raise ImageNotFoundError(name) from None

    def remove(self, name: str) -> RasterBuffer:
        try:
            return self._images.pop(name)
        except KeyError:
            raise ImageNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._images)

    def __contains__(self, name: str) -> bool:
        return name in self._images

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
