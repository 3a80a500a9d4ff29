"""Expediente: the full record of one well permit application under review.

Text fields hold exactly what the reviewer typed; blank means "not supplied".
Measured values are kept as text and parsed only when evaluated, so a
half-typed or non-numeric entry degrades to "no data" instead of failing.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class _DossierModel(BaseModel):
    """A JSON null stands for a value left unset."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Meta(_DossierModel):
    model_config = {"coerce_numbers_to_str": True}

    expedienteId: str = ""
    fecha: str = Field(default_factory=lambda: date.today().isoformat())
    revisadoPor: str = ""


class Basicos(_DossierModel):
    """Applicant and driller identification."""

    model_config = {"coerce_numbers_to_str": True}

    propietario: str = ""
    cuit: str = ""
    domicilio: str = ""
    contacto: str = ""
    autorizacionNoPropietario: bool = False  # notarised authorisation when not the owner
    perforista: str = ""
    perforistaRegistro: str = ""


class Tecnicos(_DossierModel):
    """Technical well parameters."""

    model_config = {"coerce_numbers_to_str": True}

    departamento: str = ""
    localidad: str = ""
    partida: str = ""
    coords_gms: str = ""  # degrees minutes seconds, WGS84
    profundidad_m: str = ""
    diametro_pulg: str = ""
    caudal_m3h: str = ""
    caudal_anual_m3: str = ""
    horas_anuales: str = ""
    uso: str = ""
    acuifero: str = ""


class Docs(_DossierModel):
    tituloPropiedad: bool = False
    permisoExploracion: bool = False
    ensayoBombeo: bool = False
    estudioInterferencia: bool = False
    perfilesLitologicos: bool = False
    memoriaDescriptiva: bool = False
    anexos: list[str] = Field(default_factory=list)  # file names, reference only


class Analisis(_DossierModel):
    """Lab results as entered; numbers in imported JSON are kept as text."""

    model_config = {"coerce_numbers_to_str": True}

    # --- Physicochemical ---
    pH: str = ""
    arsenico: str = ""
    nitratos: str = ""
    nitritos: str = ""
    conductividad: str = ""
    dureza: str = ""
    std: str = ""
    calcio: str = ""
    magnesio: str = ""
    sodio: str = ""
    potasio: str = ""
    bicarbonato: str = ""
    carbonato: str = ""
    sulfatos: str = ""
    cloruros: str = ""
    temperatura: str = ""
    color: str = ""
    olor: str = ""
    turbiedad: str = ""

    # --- Microbiological ---
    coliformes: str = ""
    ecoli: str = ""
    salmonella: str = ""
    pseudomonas: str = ""
    aerobios: str = ""


class Firmas(_DossierModel):
    propietario: bool = False
    profesional: bool = False
    declaracionJurada: bool = False


class Expediente(_DossierModel):
    """Single aggregate dossier record."""

    meta: Meta = Field(default_factory=Meta)
    basicos: Basicos = Field(default_factory=Basicos)
    tecnicos: Tecnicos = Field(default_factory=Tecnicos)
    docs: Docs = Field(default_factory=Docs)
    analisis: Analisis = Field(default_factory=Analisis)
    firmas: Firmas = Field(default_factory=Firmas)


SECTIONS = ("meta", "basicos", "tecnicos", "docs", "analisis", "firmas")

BASICOS_REQUIRED = (
    "propietario",
    "cuit",
    "domicilio",
    "contacto",
    "perforista",
    "perforistaRegistro",
)

TECNICOS_REQUIRED = (
    "departamento",
    "localidad",
    "partida",
    "coords_gms",
    "profundidad_m",
    "diametro_pulg",
    "caudal_m3h",
    "caudal_anual_m3",
    "horas_anuales",
    "uso",
    "acuifero",
)

REQUIRED_DOCS = (
    "tituloPropiedad",
    "permisoExploracion",
    "ensayoBombeo",
    "estudioInterferencia",
    "perfilesLitologicos",
    "memoriaDescriptiva",
)

REQUIRED_SIGNATURES = ("propietario", "profesional", "declaracionJurada")


def empty_expediente() -> Expediente:
    return Expediente()
