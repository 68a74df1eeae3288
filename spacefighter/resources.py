"""Loadable resources, textures and a manager that caches them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TypeVar

from PIL import Image

from spacefighter.vector2 import Vector2

_ID_LIMIT = 1 << 16


class ResourceLoadError(Exception):
    """Raised when a resource cannot be loaded from its file."""


class Resource(ABC):
    """Something loaded from an external file and owned by a ResourceManager."""

    def __init__(self) -> None:
        self.resource_id: int | None = None
        self.manager: ResourceManager | None = None

    @abstractmethod
    def load(self, path: str, manager: ResourceManager) -> None:
        """Load the resource from path; raise ResourceLoadError on failure."""

    def is_cloneable(self) -> bool:
        """Return True if each load should hand out a fresh copy."""
        return False

    def clone(self) -> Resource:
        """Return a copy of this resource."""
        return copy.copy(self)


class Texture(Resource):
    """A two-dimensional grid of pixels."""

    def __init__(self, image: Image.Image | None = None) -> None:
        super().__init__()
        self._image: Image.Image | None = None
        self._width = 0
        self._height = 0
        self._size = Vector2.ZERO
        self._center = Vector2.ZERO
        if image is not None:
            self._set_image(image)

    def load(self, path: str, manager: ResourceManager) -> None:
        """Read the image at path."""
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except OSError as exc:
            raise ResourceLoadError(f"cannot load texture {path!r}: {exc}") from exc
        self._set_image(image)

    def _set_image(self, image: Image.Image) -> None:
        self._image = image
        self._width, self._height = image.size
        self._size = Vector2(self._width, self._height)
        self._center = self._size / 2

    @property
    def image(self) -> Image.Image | None:
        """The underlying image, or None if nothing has been loaded."""
        return self._image

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._height

    @property
    def size(self) -> Vector2:
        """Dimensions as a vector."""
        return self._size

    @property
    def center(self) -> Vector2:
        """The centre of the texture."""
        return self._center

    def is_cloneable(self) -> bool:
        return False


R = TypeVar("R", bound=Resource)


class ResourceManager:
    """Loads resources, caches them by path and hands out identifiers."""

    def __init__(self) -> None:
        self._resources: dict[str, Resource] = {}
        self._clones: list[Resource] = []
        self._content_path = ""
        self._next_id = 0

    @property
    def content_path(self) -> str:
        """The prefix added to relative resource paths."""
        return self._content_path

    def set_content_path(self, path: str) -> None:
        """Set the folder prefix where game content is stored."""
        self._content_path = path

    def _assign_id(self, resource: Resource) -> None:
        resource.resource_id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT

    def load(
        self,
        kind: type[R],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> R:
        """Return the resource of the given kind at path, loading it if needed.

        A cached cloneable resource is cloned; the clone receives a new id.
        Raises ResourceLoadError if the file cannot be loaded and TypeError if
        the cached resource is of a different kind.
        """
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, kind):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, not a {kind.__name__}"
                )
            if cached.is_cloneable():
                duplicate = cached.clone()
                self._assign_id(duplicate)
                self._clones.append(duplicate)
                return duplicate  # type: ignore[return-value]
            return cached

        resource = kind()
        resource.manager = self
        full_path = self._content_path + path if append_content_path else path
        resource.load(full_path, self)
        if cache:
            self._resources[path] = resource
        self._assign_id(resource)
        return resource

    def unload_all(self) -> None:
        """Forget every cached resource and every clone handed out."""
        self._resources.clear()
        self._clones.clear()