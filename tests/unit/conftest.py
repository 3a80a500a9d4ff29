"""Shared fixtures: a dossier that passes every section."""

from __future__ import annotations

import pytest

from corufa.models.expediente import Expediente
from corufa.state import AppState

COMPLETE_DOSSIER = {
    "meta": {"expedienteId": "EXP-2024-117", "fecha": "2024-05-02", "revisadoPor": "M. Giménez"},
    "basicos": {
        "propietario": "Agropecuaria Los Ceibos SA",
        "cuit": "30-71234567-8",
        "domicilio": "Ruta 12 km 45, Concordia",
        "contacto": "ceibos@example.com",
        "autorizacionNoPropietario": False,
        "perforista": "Perforaciones del Litoral SRL",
        "perforistaRegistro": "P-0457",
    },
    "tecnicos": {
        "departamento": "Concordia",
        "localidad": "Los Charrúas",
        "partida": "123456",
        "coords_gms": "31°10'12\" S 58°05'40\" O",
        "profundidad_m": "120",
        "diametro_pulg": "8",
        "caudal_m3h": "60",
        "caudal_anual_m3": "750000",
        "horas_anuales": "2000",
        "uso": "Riego",
        "acuifero": "Guaraní",
    },
    "docs": {
        "tituloPropiedad": True,
        "permisoExploracion": True,
        "ensayoBombeo": True,
        "estudioInterferencia": True,
        "perfilesLitologicos": True,
        "memoriaDescriptiva": True,
        "anexos": ["ensayo_bombeo.pdf"],
    },
    "analisis": {"pH": "7.1", "arsenico": "0.005", "coliformes": "0", "aerobios": "50"},
    "firmas": {"propietario": True, "profesional": True, "declaracionJurada": True},
}


@pytest.fixture
def complete_exp() -> Expediente:
    return Expediente.model_validate(COMPLETE_DOSSIER)


@pytest.fixture
def complete_state(complete_exp) -> AppState:
    return AppState(exp=complete_exp)
