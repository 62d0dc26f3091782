"""Catalog record models returned by the object search API."""

from pydantic import BaseModel, ConfigDict


class Person(BaseModel):
    """Person credited on a catalog object."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    displayname: str | None = None


class ImageRef(BaseModel):
    """Opaque reference to one photo of a catalog object.

    The feature view does not read per-image fields; every photo entry shows
    the record's ``primaryimageurl``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    imageid: int | None = None
    baseimageurl: str | None = None


class Record(BaseModel):
    """Catalog object that can be featured in the detail view."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = None
    dated: str | None = None
    description: str | None = None
    style: str | None = None
    dimensions: str | None = None
    division: str | None = None
    contact: str | None = None
    creditline: str | None = None
    culture: str | None = None
    technique: str | None = None
    medium: str | None = None
    people: tuple[Person, ...] | None = None
    images: tuple[ImageRef, ...] | None = None
    primaryimageurl: str | None = None
