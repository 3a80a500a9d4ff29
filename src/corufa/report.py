"""Printable plain-text review report (the "Generar PDF" sheet)."""

from __future__ import annotations

from typing import Optional

from corufa.models.evaluation import (
    AnalysisEvaluation,
    AnalysisStatus,
    DossierReport,
    ParameterState,
    RegistryStatus,
    SectionResult,
    SectionStatus,
)
from corufa.state import AppState, evaluate

PARAMETER_LABELS = {
    "pH": "pH",
    "arsenico": "Arsénico (mg/L)",
    "nitratos": "Nitratos (mg/L)",
    "nitritos": "Nitritos (mg/L)",
    "conductividad": "Conductividad (µS/cm)",
    "dureza": "Dureza total (mg/L)",
    "std": "Sólidos totales disueltos (mg/L)",
    "calcio": "Calcio (mg/L)",
    "magnesio": "Magnesio (mg/L)",
    "sodio": "Sodio (mg/L)",
    "potasio": "Potasio (mg/L)",
    "bicarbonato": "Bicarbonato (mg/L)",
    "carbonato": "Carbonato (mg/L)",
    "sulfatos": "Sulfatos (mg/L)",
    "cloruros": "Cloruros (mg/L)",
    "temperatura": "Temperatura (°C)",
    "coliformes": "Coliformes totales (NMP/100 mL)",
    "ecoli": "E. coli (NMP/100 mL)",
    "salmonella": "Salmonella (presencia=1/ausencia=0)",
    "pseudomonas": "Pseudomonas (presencia=1/ausencia=0)",
    "aerobios": "Aeróbicos mesófilos (UFC/mL)",
}

STATE_BADGES = {
    ParameterState.WITHIN: "OK",
    ParameterState.OUT: "Fuera",
    ParameterState.NO_DATA: "—",
}

SECTION_TEXT = {
    SectionStatus.COMPLETE: "Completo",
    SectionStatus.INCOMPLETE: "Incompleto",
    SectionStatus.EMPTY: "Vacío",
    SectionStatus.NOT_APPLICABLE: "—",
}

REGISTRY_TEXT = {
    RegistryStatus.NO_REGISTRY: "Sin padrón",
    RegistryStatus.VALIDATED: "Registro validado",
    RegistryStatus.NOT_FOUND: "Registro no encontrado",
}


def format_money(n: Optional[float]) -> str:
    """ARS without decimals, es-AR grouping: 90163 -> "$ 90.163"."""
    if n is None:
        return "—"
    return "$ " + f"{round(n):,}".replace(",", ".")


def analysis_summary(evaluation: AnalysisEvaluation) -> str:
    if evaluation.status is AnalysisStatus.NO_DATA:
        return "Sin datos"
    text = f"{evaluation.ok}/{evaluation.present} en norma"
    if evaluation.bad:
        text += f" • {evaluation.bad} fuera"
    return text


def _section_line(title: str, result: SectionResult) -> str:
    return f"{title}: {SECTION_TEXT[result.status]} ({result.filled}/{result.total})"


def render_report(state: AppState, report: DossierReport | None = None) -> str:
    report = report or evaluate(state)
    exp = state.exp
    lines = [
        "Checklist CORUFA · Filtro Pre-Plenario",
        f"Expediente: {exp.meta.expedienteId} · Revisión: {exp.meta.fecha} · {exp.meta.revisadoPor}",
        "",
        f"Padrón de perforistas: {REGISTRY_TEXT[report.registry]}",
        _section_line("1) Identificación básica", report.basicos),
        _section_line("2) Datos técnicos de la perforación", report.tecnicos),
        f"   Categoría tasa: {report.tasa.cat} · {format_money(report.tasa.monto)}",
        f"3) Documentación técnica obligatoria: {report.docs.filled}/{report.docs.total} adjuntos",
    ]
    lines.extend(f"   - Anexo: {name}" for name in exp.docs.anexos)
    lines.append(f"4) Análisis de agua: {analysis_summary(report.analisis)}")
    for field, state_ in report.analisis.states.items():
        value = getattr(exp.analisis, field)
        lines.append(f"   {PARAMETER_LABELS.get(field, field)}: {value or '—'} [{STATE_BADGES[state_]}]")
    lines.append(
        "5) Firmas y declaración jurada: "
        + ("Firmas completas" if report.firmas.complete else "Faltan firmas")
    )
    lines.append("")
    if report.approved:
        lines.append("Resultado: APROBADO. El legajo puede elevarse a Plenario.")
    else:
        lines.append("Resultado: NO APROBADO. Faltan completar secciones y/o documentación obligatoria.")
    return "\n".join(lines) + "\n"
