"""Bill-of-materials sub-model for build descriptor templates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from ..utils import to_camel_case

if TYPE_CHECKING:
    from .models import ProjectRequest


class VersionProperty(BaseModel):
    """A build property (``spring-cloud.version``) that pins a BOM version.

    Internal properties are defined by the generated build itself; Gradle
    builds refer to those in camelCase since dotted names are not valid
    Groovy identifiers.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    internal: bool = True

    def to_standard_format(self) -> str:
        return self.name

    def to_camel_case_format(self) -> str:
        """``spring-cloud.version`` -> ``springCloudVersion``."""
        return to_camel_case(self.name)


class BillOfMaterials(BaseModel):
    """An imported BOM."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None
    version_property: VersionProperty | None = Field(default=None)


def compute_version_property(request: ProjectRequest, prop: VersionProperty) -> str:
    if request.is_gradle and prop.internal:
        return prop.to_camel_case_format()
    return prop.to_standard_format()


def to_bom_model(request: ProjectRequest, bom: BillOfMaterials) -> dict[str, Any]:
    """Build the template sub-model for one BOM.

    ``version_token`` is a property reference (``${springCloudVersion}``)
    when the BOM is pinned through a property, the literal version otherwise.
    """
    if bom.version_property is not None:
        token = "${" + compute_version_property(request, bom.version_property) + "}"
    else:
        token = bom.version
    return {
        "group_id": bom.group_id,
        "artifact_id": bom.artifact_id,
        "version_token": token,
    }
