# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 output models.

Field declaration order is the serialized key order.  Dump with
``by_alias=True, exclude_none=True``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bugsarif.core.constants import SARIF_SCHEMA_URL, SARIF_VERSION, Level


class SarifMessage(BaseModel):
    text: str | None = None
    id: str | None = None
    arguments: list[str] | None = None


class SarifMultiformatMessage(BaseModel):
    text: str


class SarifArtifactLocation(BaseModel):
    uri: str
    uriBaseId: str | None = None


class SarifRegion(BaseModel):
    startLine: int
    endLine: int | None = None


class SarifPhysicalLocation(BaseModel):
    artifactLocation: SarifArtifactLocation
    region: SarifRegion | None = None


class SarifLogicalLocation(BaseModel):
    name: str | None = None
    fullyQualifiedName: str | None = None
    kind: str | None = None
    properties: dict[str, object] | None = None


class SarifLocation(BaseModel):
    physicalLocation: SarifPhysicalLocation | None = None
    logicalLocations: list[SarifLogicalLocation] | None = None


class SarifPropertyBag(BaseModel):
    tags: list[str] = Field(default_factory=list)


class SarifReportingDescriptor(BaseModel):
    id: str
    shortDescription: SarifMultiformatMessage
    fullDescription: SarifMultiformatMessage
    messageStrings: dict[str, SarifMultiformatMessage] = Field(default_factory=dict)
    helpUri: str | None = None
    properties: SarifPropertyBag = Field(default_factory=SarifPropertyBag)


class SarifToolComponent(BaseModel):
    name: str
    version: str | None = None
    language: str | None = None
    shortDescription: SarifMultiformatMessage | None = None
    informationUri: str | None = None
    organization: str | None = None
    rules: list[SarifReportingDescriptor] | None = None


class SarifTool(BaseModel):
    driver: SarifToolComponent
    extensions: list[SarifToolComponent] = Field(default_factory=list)


class SarifStackFrame(BaseModel):
    location: SarifLocation | None = None


class SarifStack(BaseModel):
    message: SarifMessage
    frames: list[SarifStackFrame] = Field(default_factory=list)


class SarifException(BaseModel):
    kind: str
    message: str
    stack: SarifStack
    innerExceptions: list[SarifException] = Field(default_factory=list)


class SarifDescriptorReference(BaseModel):
    id: str


class SarifNotification(BaseModel):
    descriptor: SarifDescriptorReference
    message: SarifMessage
    level: Level = Level.ERROR
    exception: SarifException | None = None


class SarifInvocation(BaseModel):
    exitCode: int
    exitSignalName: str
    executionSuccessful: bool
    toolExecutionNotifications: list[SarifNotification] = Field(default_factory=list)
    toolConfigurationNotifications: list[SarifNotification] = Field(default_factory=list)


class SarifResult(BaseModel):
    ruleId: str
    ruleIndex: int
    level: Level
    message: SarifMessage
    locations: list[SarifLocation] = Field(default_factory=list)


class SarifRun(BaseModel):
    tool: SarifTool
    invocations: list[SarifInvocation] = Field(default_factory=list)
    results: list[SarifResult] = Field(default_factory=list)
    originalUriBaseIds: dict[str, SarifArtifactLocation] = Field(default_factory=dict)


class SarifReport(BaseModel):
    version: str = SARIF_VERSION
    schema_uri: str = Field(default=SARIF_SCHEMA_URL, serialization_alias="$schema")
    runs: list[SarifRun] = Field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
