from collections import defaultdict
from dataclasses import dataclass

ESTADO_COMPLETO = '✅ Completo'
ESTADO_INCOMPLETO = '⚠️ Incompleto'


def _funcion_id(entrada):
    if isinstance(entrada, dict):
        return entrada.get('funcion_id')
    return entrada.funcion_id


@dataclass(frozen=True)
class TeamStatus:
    required_count: int
    assigned_count: int
    missing: tuple
    is_complete: bool

    @property
    def missing_function_ids(self):
        return frozenset(_funcion_id(r) for r in self.missing)

    @property
    def estado(self):
        return ESTADO_COMPLETO if self.is_complete else ESTADO_INCOMPLETO


def compute_team_status(required, assigned):
    """
    Compara las funciones requeridas de un mandatario con las asignadas.

    Ambas colecciones deben venir filtradas a un único mandatario. Las
    entradas requeridas cuya función no está cubierta se devuelven en
    `missing`, en el orden recibido. Sin funciones requeridas el equipo
    se considera completo.
    """
    required = list(required)
    assigned = list(assigned)
    cubiertas = {_funcion_id(a) for a in assigned}
    missing = tuple(r for r in required if _funcion_id(r) not in cubiertas)
    return TeamStatus(
        required_count=len(required),
        assigned_count=len(assigned),
        missing=missing,
        is_complete=not missing,
    )


def estado_equipos(mandatarios=None):
    """
    Devuelve [(mandatario, TeamStatus), ...] para los mandatarios dados
    (todos por defecto), con una sola lectura de requeridos y asignaciones.
    """
    # Importación local: compute_team_status no depende del ORM
    from .models import Asignacion, EquipoRequerido, Mandatario

    if mandatarios is None:
        mandatarios = Mandatario.objects.all()
    mandatarios = list(mandatarios)
    ids = [m.pk for m in mandatarios]

    requeridos = defaultdict(list)
    for req in EquipoRequerido.objects.filter(mandatario_id__in=ids).select_related('funcion').order_by('funcion__nombre'):
        requeridos[req.mandatario_id].append(req)

    asignados = defaultdict(list)
    for asig in Asignacion.objects.filter(mandatario_id__in=ids).select_related('funcion', 'personal'):
        asignados[asig.mandatario_id].append(asig)

    return [
        (m, compute_team_status(requeridos[m.pk], asignados[m.pk]))
        for m in mandatarios
    ]
