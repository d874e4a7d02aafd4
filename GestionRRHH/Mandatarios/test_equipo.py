from types import SimpleNamespace

import pytest

from Mandatarios.equipo import ESTADO_COMPLETO, ESTADO_INCOMPLETO, TeamStatus, compute_team_status


def test_empty_requirements_are_vacuously_complete():
    estado = compute_team_status([], [])
    assert estado == TeamStatus(required_count=0, assigned_count=0, missing=(), is_complete=True)
    assert estado.estado == ESTADO_COMPLETO


def test_vacuous_completeness_ignores_assignments():
    estado = compute_team_status([], [{'funcion_id': 7}])
    assert estado.is_complete
    assert estado.assigned_count == 1


def test_missing_function_is_reported():
    requerido = [{'funcion_id': 1}, {'funcion_id': 2}]
    estado = compute_team_status(requerido, [{'funcion_id': 1}])
    assert estado.missing == ({'funcion_id': 2},)
    assert estado.missing_function_ids == frozenset({2})
    assert not estado.is_complete
    assert estado.estado == ESTADO_INCOMPLETO


def test_scenario_with_named_functions():
    requerido = [{'funcion_id': 'Seguridad'}, {'funcion_id': 'Chofer'}, {'funcion_id': 'Edecán'}]
    estado = compute_team_status(requerido, [{'funcion_id': 'Seguridad'}])
    assert [r['funcion_id'] for r in estado.missing] == ['Chofer', 'Edecán']
    assert estado.required_count == 3
    assert estado.assigned_count == 1
    assert estado.is_complete is False


def test_duplicates_and_extra_assignments_keep_team_complete():
    requerido = [SimpleNamespace(funcion_id=1), SimpleNamespace(funcion_id=2)]
    asignado = [
        SimpleNamespace(funcion_id=1), SimpleNamespace(funcion_id=1),
        SimpleNamespace(funcion_id=2), SimpleNamespace(funcion_id=99),
    ]
    estado = compute_team_status(requerido, asignado)
    assert estado.is_complete
    assert estado.missing == ()
    assert estado.assigned_count == 4


def test_accepts_generators_and_is_idempotent():
    requerido = [{'funcion_id': 1}, {'funcion_id': 3}]
    asignado = [{'funcion_id': 3}]
    primero = compute_team_status((r for r in requerido), iter(asignado))
    segundo = compute_team_status(requerido, asignado)
    assert primero == segundo
    assert primero.missing_function_ids == frozenset({1})


def test_team_status_is_immutable():
    estado = compute_team_status([], [])
    with pytest.raises(AttributeError):
        estado.is_complete = False
