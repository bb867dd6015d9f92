#!/usr/bin/env python3
"""
sensorchips API Schemas - Pydantic Models for Responses
"""

from typing import List, Optional
from pydantic import BaseModel

from .models import ChipModel, Feature


class FeatureSchema(BaseModel):
    name: str
    label: str
    number: int
    mode: str
    kind: str
    mapping: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: Feature, chip: ChipModel) -> "FeatureSchema":
        return cls(
            name=feature.name,
            label=feature.label,
            number=feature.number,
            mode=feature.mode.value,
            kind=feature.kind.value,
            mapping=chip.mapping_of(feature.name),
        )


class ChipSchema(BaseModel):
    prefix: str
    description: Optional[str] = None
    similar_to: Optional[str] = None
    features: List[FeatureSchema]

    @classmethod
    def from_chip(cls, chip: ChipModel) -> "ChipSchema":
        return cls(
            prefix=chip.prefix,
            description=chip.description,
            similar_to=chip.similar_to,
            features=[FeatureSchema.from_feature(f, chip) for f in chip.features],
        )


class ChipListResponse(BaseModel):
    chips: List[str]


class FeatureResponse(BaseModel):
    prefix: str
    feature: FeatureSchema
