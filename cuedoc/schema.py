"""Validation schema for the JSON form of a cue sheet document.

Decoded JSON is checked against these models before it is turned into the
dataclasses in :mod:`cuedoc.models`. Unknown fields are rejected and numbers
must be real 32-bit integers. Type and flag names are only checked to be
strings: a name with no matching enum member is handed on as a plain string,
and the generator reports it.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from .models import (
    INT32_MAX,
    INT32_MIN,
    MSF,
    CommentTag,
    Cuesheet,
    File,
    FileType,
    Index,
    Tags,
    Track,
    TrackFlag,
    TrackType,
)

Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


def _to_enum(enum_cls: type[Enum], name: str) -> Any:
    try:
        return enum_cls(name)
    except ValueError:
        return name


class DocumentModel(BaseModel):
    """Base for all document models."""

    model_config = ConfigDict(extra="forbid")


class MSFDocument(DocumentModel):
    minute: Int32 = 0
    second: Int32 = 0
    frame: Int32 = 0

    def build(self) -> MSF:
        return MSF(minute=self.minute, second=self.second, frame=self.frame)


class CommentTagDocument(DocumentModel):
    name: StrictStr = Field("", description="Upper-case tag name")
    value: StrictStr = Field("", description="Tag value without quotes")

    def build(self) -> CommentTag:
        return CommentTag(name=self.name, value=self.value)


class TagsDocument(DocumentModel):
    title: StrictStr | None = None
    performer: StrictStr | None = None
    songwriter: StrictStr | None = None
    comment_tags: list[CommentTagDocument] = Field(default_factory=list)

    def build(self) -> Tags:
        return Tags(
            title=self.title,
            performer=self.performer,
            songwriter=self.songwriter,
            comment_tags=[tag.build() for tag in self.comment_tags],
        )


class IndexDocument(DocumentModel):
    number: Int32 = 0
    position: MSFDocument = Field(default_factory=MSFDocument)

    def build(self) -> Index:
        return Index(number=self.number, position=self.position.build())


class TrackDocument(DocumentModel):
    number: Int32 = 0
    type: StrictStr = Field(..., description="Track type name, e.g. AUDIO or MODE1_2048")
    tags: TagsDocument = Field(default_factory=TagsDocument)
    isrc: StrictStr | None = None
    flags: list[StrictStr] = Field(default_factory=list, description="Flag names, e.g. DCP or 4CH")
    pregap: MSFDocument = Field(default_factory=MSFDocument)
    postgap: MSFDocument = Field(default_factory=MSFDocument)
    indices: list[IndexDocument] = Field(default_factory=list)

    def build(self) -> Track:
        return Track(
            number=self.number,
            type=_to_enum(TrackType, self.type),
            tags=self.tags.build(),
            isrc=self.isrc,
            flags=[_to_enum(TrackFlag, flag) for flag in self.flags],
            pregap=self.pregap.build(),
            postgap=self.postgap.build(),
            indices=[index.build() for index in self.indices],
        )


class FileDocument(DocumentModel):
    path: StrictStr = ""
    type: StrictStr = Field(..., description="File type name, e.g. WAVE or BINARY")
    tracks: list[TrackDocument] = Field(default_factory=list)

    def build(self) -> File:
        return File(
            path=self.path,
            type=_to_enum(FileType, self.type),
            tracks=[track.build() for track in self.tracks],
        )


class CuesheetDocument(DocumentModel):
    """Top-level document, the counterpart of :meth:`Cuesheet.to_dict`."""

    catalog: StrictStr = ""
    cd_text_file: StrictStr | None = None
    tags: TagsDocument = Field(default_factory=TagsDocument)
    files: list[FileDocument] = Field(default_factory=list)

    def build(self) -> Cuesheet:
        return Cuesheet(
            catalog=self.catalog,
            cd_text_file=self.cd_text_file,
            tags=self.tags.build(),
            files=[file_doc.build() for file_doc in self.files],
        )
