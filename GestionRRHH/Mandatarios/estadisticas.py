from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from Personal.models import Grupo, Personal
from Personal.rangos import INSTITUCIONES
from .equipo import estado_equipos
from .models import Asignacion, Funcion, Mandatario


@dataclass(frozen=True)
class Estadisticas:
    total_personal: int = 0
    personal_asignado: int = 0
    mandatarios_activos: int = 0
    equipos_completos: int = 0
    equipos_incompletos: int = 0
    total_grupos: int = 0
    total_funciones: int = 0
    asignaciones_activas: int = 0
    eficiencia: int = 0
    miembros_por_institucion: dict = field(default_factory=dict)


def calcular_eficiencia(completos, total_mandatarios):
    # Redondeo hacia arriba en .5: 1 de 8 equipos completos es 13%.
    if total_mandatarios <= 0:
        return 0
    porcentaje = Decimal(completos * 100) / Decimal(total_mandatarios)
    return int(porcentaje.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def obtener_estadisticas():
    estados = estado_equipos(Mandatario.objects.all())
    completos = sum(1 for _, estado in estados if estado.is_complete)
    total_mandatarios = len(estados)

    por_institucion = {inst: 0 for inst in INSTITUCIONES}
    for inst in Personal.objects.filter(institucion__in=INSTITUCIONES).values_list('institucion', flat=True):
        por_institucion[inst] += 1

    return Estadisticas(
        total_personal=Personal.objects.count(),
        personal_asignado=Asignacion.objects.values('personal_id').distinct().count(),
        mandatarios_activos=total_mandatarios,
        equipos_completos=completos,
        equipos_incompletos=total_mandatarios - completos,
        total_grupos=Grupo.objects.count(),
        total_funciones=Funcion.objects.count(),
        asignaciones_activas=Asignacion.objects.count(),
        eficiencia=calcular_eficiencia(completos, total_mandatarios),
        miembros_por_institucion=por_institucion,
    )
