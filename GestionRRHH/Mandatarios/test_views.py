import io

import pandas as pd
import pytest
from django.core.management import call_command
from django.urls import reverse

from Mandatarios.equipo import estado_equipos
from Mandatarios.estadisticas import calcular_eficiencia, obtener_estadisticas
from Mandatarios.models import Asignacion, EquipoRequerido, Funcion, Mandatario
from Personal.models import Personal

pytestmark = pytest.mark.django_db


@pytest.fixture
def funciones():
    return {nombre: Funcion.objects.create(nombre=nombre) for nombre in ('Seguridad', 'Chofer', 'Edecán')}


@pytest.fixture
def personas():
    return [
        Personal.objects.create(nombres='Ana', cedula='1', rango='Sargento', institucion='PN'),
        Personal.objects.create(nombres='Luis', cedula='2', rango='Coronel', institucion='ERD'),
        Personal.objects.create(nombres='Rosa', cedula='3', rango='Civil', institucion='MIREX'),
    ]


@pytest.fixture
def escenario(funciones, personas):
    incompleto = Mandatario.objects.create(nombre='Presidente A', pais='Chile')
    completo = Mandatario.objects.create(nombre='Presidente B', pais='Perú')
    sin_requisitos = Mandatario.objects.create(nombre='Presidente C', pais='Haití')

    for nombre in ('Seguridad', 'Chofer', 'Edecán'):
        EquipoRequerido.objects.create(mandatario=incompleto, funcion=funciones[nombre])
    Asignacion.objects.create(mandatario=incompleto, funcion=funciones['Seguridad'], personal=personas[0])

    EquipoRequerido.objects.create(mandatario=completo, funcion=funciones['Chofer'])
    Asignacion.objects.create(mandatario=completo, funcion=funciones['Chofer'], personal=personas[1])
    Asignacion.objects.create(mandatario=completo, funcion=funciones['Chofer'], personal=personas[0])

    # Sin mandatario: no cuenta para ningún equipo
    Asignacion.objects.create(funcion=funciones['Edecán'], personal=personas[2])
    return incompleto, completo, sin_requisitos


def test_estado_equipos_groups_by_mandatario(escenario):
    incompleto, completo, sin_requisitos = escenario
    estados = dict(estado_equipos())

    assert [r.funcion.nombre for r in estados[incompleto].missing] == ['Chofer', 'Edecán']
    assert estados[incompleto].assigned_count == 1
    assert estados[completo].is_complete
    assert estados[completo].assigned_count == 2
    assert estados[sin_requisitos].is_complete
    assert estados[sin_requisitos].required_count == 0


def test_calcular_eficiencia():
    assert calcular_eficiencia(0, 0) == 0
    assert calcular_eficiencia(2, 3) == 67
    assert calcular_eficiencia(1, 4) == 25


def test_calcular_eficiencia_rounds_half_up():
    assert calcular_eficiencia(1, 8) == 13
    assert calcular_eficiencia(3, 8) == 38
    assert calcular_eficiencia(1, 3) == 33


def test_obtener_estadisticas(escenario):
    estadisticas = obtener_estadisticas()
    assert estadisticas.total_personal == 3
    assert estadisticas.personal_asignado == 3
    assert estadisticas.mandatarios_activos == 3
    assert estadisticas.equipos_completos == 2
    assert estadisticas.equipos_incompletos == 1
    assert estadisticas.total_funciones == 3
    assert estadisticas.asignaciones_activas == 4
    assert estadisticas.eficiencia == 67
    assert estadisticas.miembros_por_institucion['ERD'] == 1
    assert estadisticas.miembros_por_institucion['MIREX'] == 1
    assert estadisticas.miembros_por_institucion['FARD'] == 0


def test_dashboard(client_observador, escenario):
    response = client_observador.get(reverse('Mandatarios:dashboard'))
    assert response.status_code == 200
    assert response.context['estadisticas'].equipos_incompletos == 1


def test_mandatario_list_shows_status(client_observador, escenario):
    response = client_observador.get(reverse('Mandatarios:mandatario_list'))
    assert response.status_code == 200
    contenido = response.content.decode()
    assert '✅ Completo' in contenido
    assert '⚠️ Incompleto' in contenido


def test_mandatario_list_only_incomplete(client_observador, escenario):
    response = client_observador.get(reverse('Mandatarios:mandatario_list'), {'incompletos': '1'})
    assert [m.nombre for m, _ in response.context['equipos']] == ['Presidente A']


def test_mandatario_detail_lists_missing(client_observador, escenario):
    incompleto = escenario[0]
    response = client_observador.get(reverse('Mandatarios:mandatario_detail', args=[incompleto.pk]))
    assert response.status_code == 200
    estado = response.context['estado']
    assert not estado.is_complete
    assert [r.funcion.nombre for r in estado.missing] == ['Chofer', 'Edecán']


def test_agregar_requerido_rejects_duplicate(client_editor, escenario, funciones):
    completo = escenario[1]
    url = reverse('Mandatarios:agregar_requerido', args=[completo.pk])

    client_editor.post(url, {'funcion': funciones['Chofer'].pk})
    assert EquipoRequerido.objects.filter(mandatario=completo).count() == 1

    client_editor.post(url, {'funcion': funciones['Edecán'].pk})
    assert EquipoRequerido.objects.filter(mandatario=completo).count() == 2
    assert not dict(estado_equipos([completo]))[completo].is_complete


def test_quitar_requerido(client_editor, escenario):
    incompleto = escenario[0]
    requerido = EquipoRequerido.objects.filter(mandatario=incompleto).first()
    response = client_editor.post(reverse('Mandatarios:quitar_requerido', args=[requerido.pk]))
    assert response.status_code == 302
    assert EquipoRequerido.objects.filter(mandatario=incompleto).count() == 2


def test_viewer_cannot_add_requirement(client_observador, escenario, funciones):
    completo = escenario[1]
    client_observador.post(
        reverse('Mandatarios:agregar_requerido', args=[completo.pk]),
        {'funcion': funciones['Edecán'].pk},
    )
    assert EquipoRequerido.objects.filter(mandatario=completo).count() == 1


def test_asignacion_completes_team(client_editor, escenario, funciones, personas):
    incompleto = escenario[0]
    for nombre in ('Chofer', 'Edecán'):
        response = client_editor.post(reverse('Mandatarios:asignacion_create'), {
            'mandatario': incompleto.pk,
            'funcion': funciones[nombre].pk,
            'personal': personas[1].pk,
        })
        assert response.status_code == 302
    assert dict(estado_equipos([incompleto]))[incompleto].is_complete


def test_asignacion_form_lists_personal_by_rank(client_editor, personas):
    response = client_editor.get(reverse('Mandatarios:asignacion_create'))
    choices = response.context['form'].fields['personal'].choices
    assert [label for _, label in choices][1:] == ['Coronel Luis', 'Sargento Ana', 'Civil Rosa']


def test_exportar_mandatarios(client_observador, escenario):
    response = client_observador.get(reverse('Mandatarios:exportar_mandatarios'))
    assert response.status_code == 200
    df = pd.read_excel(io.BytesIO(response.content))
    fila = df[df['Mandatario'] == 'Presidente A'].iloc[0]
    assert fila['Funciones Faltantes'] == 'Chofer, Edecán'
    assert fila['Estado'] == '⚠️ Incompleto'


def test_exportar_asignaciones(client_observador, escenario):
    response = client_observador.get(reverse('Mandatarios:exportar_asignaciones'))
    df = pd.read_excel(io.BytesIO(response.content))
    assert len(df) == 4
    completo = df[df['Mandatario'] == 'Presidente B']
    assert list(completo['Rango']) == ['Coronel', 'Sargento']


def test_estado_equipos_command(escenario):
    salida = io.StringIO()
    call_command('estado_equipos', '--incompletos', stdout=salida)
    texto = salida.getvalue()
    assert 'Presidente A' in texto
    assert 'faltan: Chofer, Edecán' in texto
    assert 'Presidente B' not in texto
    assert '1 mandatarios, 0 con equipo completo.' in texto
