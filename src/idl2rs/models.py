from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Modifier(str, Enum):
    POINTER = "pointer"
    CONST = "const"


class Type(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_type: str = ""
    # Outermost qualifier first.
    modifiers: tuple[Modifier, ...] = ()


class Parameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: Type = Field(default_factory=Type)
    attributes: tuple[str, ...] = ()


class Method(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    return_type: Type = Field(default_factory=Type)
    parameters: tuple[Parameter, ...] = ()
    doc_comment: str | None = None


class Variant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    doc_comment: str | None = None


class TypedefEnum(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    variants: tuple[Variant, ...] = ()
    doc_comment: str | None = None


class StructField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: Type = Field(default_factory=Type)
    doc_comment: str | None = None


class TypedefStruct(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    fields: tuple[StructField, ...] = ()
    doc_comment: str | None = None


class Interface(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    parent: str = ""
    uuid: str | None = None
    attributes: tuple[str, ...] = ()
    methods: tuple[Method, ...] = ()
    enums: tuple[TypedefEnum, ...] = ()
    structs: tuple[TypedefStruct, ...] = ()
    doc_comment: str | None = None


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    interfaces: tuple[Interface, ...] = ()
