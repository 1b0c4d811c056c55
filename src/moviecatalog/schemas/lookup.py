"""Pydantic schemas for genre and director lookups."""

from pydantic import BaseModel, ConfigDict, Field


class GenreResponse(BaseModel):
    """Genre response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(serialization_alias="id_genero")
    name: str = Field(serialization_alias="nombre")


class DirectorResponse(BaseModel):
    """Director response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(serialization_alias="id_director")
    first_name: str = Field(serialization_alias="nombre")
    last_name: str = Field(serialization_alias="apellido")
