from types import SimpleNamespace

import pytest

from Personal.rangos import (
    CATEGORIAS_RANGO, INSTITUCIONES, ORDEN_RANGOS, RANGO_CHOICES, SENTINEL_ORDER, RankCategory,
    classify_rank, compare_by_institution, compare_by_rank, compare_by_rank_and_institution,
    institution_order, rank_band, rank_order_key, sort_by_rank,
)


@pytest.mark.parametrize("rango, categoria", [
    ('Mayor General', RankCategory.OFICIALES_GENERALES),
    ('General de Brigada', RankCategory.OFICIALES_GENERALES),
    ('Coronel', RankCategory.OFICIALES_SUPERIORES),
    ('Capitán de Navio', RankCategory.OFICIALES_SUPERIORES),
    ('Capitán de Corbeta', RankCategory.OFICIALES_SUPERIORES),
    ('Capitán', RankCategory.OFICIALES_SUBALTERNOS),
    ('2do.Teniente', RankCategory.OFICIALES_SUBALTERNOS),
    ('Tte. de Corbeta', RankCategory.OFICIALES_SUBALTERNOS),
    ('Sargento Mayor', RankCategory.ALISTADOS),
    ('Marinero', RankCategory.ALISTADOS),
    ('Asimilado Militar', RankCategory.ASIMILADOS),
    ('Civil', RankCategory.CIVILES),
])
def test_classify_rank_known_labels(rango, categoria):
    assert classify_rank(rango) is categoria


def test_every_table_label_classifies_to_its_category():
    for categoria, rangos in CATEGORIAS_RANGO.items():
        for rango in rangos:
            assert classify_rank(rango) is categoria


@pytest.mark.parametrize("rango", [None, '', 'General', 'coronel', 'Capitan', ' Coronel', 'Capitán de Navío'])
def test_classify_rank_falls_back_to_otros(rango):
    assert classify_rank(rango) is RankCategory.OTROS


def test_category_values_are_display_labels():
    assert RankCategory.OFICIALES_SUPERIORES == 'Oficiales Superiores'
    assert RankCategory.OTROS.value == 'Otros'


def test_order_and_category_tables_cover_the_same_labels():
    ordenados = {rango for rango, _ in ORDEN_RANGOS}
    categorizados = {rango for rangos in CATEGORIAS_RANGO.values() for rango in rangos}
    assert ordenados == categorizados


@pytest.mark.parametrize("rango, orden", [
    ('Mayor General', 100),
    ('General de Brigada', 200),
    ('Coronel', 300),
    ('Capitán de Navio', 301),
    ('Teniente Coronel', 400),
    ('Capitán de Fragata', 401),
    ('Mayor', 500),
    ('Capitán de Corbeta', 501),
    ('Capitán', 600),
    ('Teniente de Navio', 601),
    ('1er. Teniente', 700),
    ('Tte. de Fragata', 701),
    ('2do.Teniente', 800),
    ('Tte. de Corbeta', 801),
    ('Sargento Mayor', 900),
    ('Sargento', 1000),
    ('Cabo', 1100),
    ('Raso', 1200),
    ('Marinero', 1201),
    ('Asimilado Militar', 1300),
    ('Asimilado', 1400),
    ('Civil', 1500),
])
def test_rank_order_key(rango, orden):
    assert rank_order_key(rango) == orden


@pytest.mark.parametrize("rango", [None, '', 'Almirante', 'CORONEL'])
def test_rank_order_key_sentinel(rango):
    assert rank_order_key(rango) == SENTINEL_ORDER == 9999


def test_equivalent_ranks_share_a_band_but_keep_sub_order():
    assert rank_order_key('Coronel') < rank_order_key('Capitán de Navio') < rank_order_key('Teniente Coronel')
    assert rank_band('Coronel') == rank_band('Capitán de Navio') == 300
    assert rank_band('Capitán') == rank_band('Teniente de Navio') == 600
    assert rank_band('Teniente Coronel') != rank_band('Coronel')
    assert rank_band('Desconocido') == SENTINEL_ORDER


def test_compare_by_rank_is_reflexive_and_follows_order_key():
    coronel = {'rango': 'Coronel'}
    sargento = SimpleNamespace(rango='Sargento')
    sin_rango = {}

    assert compare_by_rank(coronel, coronel) == 0
    assert compare_by_rank(coronel, sargento) == -1
    assert compare_by_rank(sargento, coronel) == 1
    assert compare_by_rank(sargento, sin_rango) == -1
    assert compare_by_rank({'rango': 'X'}, {'rango': None}) == 0


def test_sort_by_rank_scenario():
    personas = [{'rango': 'Capitán de Navio'}, {'rango': 'Coronel'}, {'rango': 'Sargento'}]
    assert [p['rango'] for p in sort_by_rank(personas)] == ['Coronel', 'Capitán de Navio', 'Sargento']


def test_sort_by_rank_is_stable_for_ties():
    personas = [
        {'rango': 'Cabo', 'nombre': 'b'},
        {'rango': 'Desconocido', 'nombre': 'z'},
        {'rango': 'Cabo', 'nombre': 'a'},
        {'rango': None, 'nombre': 'y'},
    ]
    assert [p['nombre'] for p in sort_by_rank(personas)] == ['b', 'a', 'z', 'y']


def test_institution_order_puts_unknown_last():
    assert [institution_order(i) for i in INSTITUCIONES] == list(range(len(INSTITUCIONES)))
    assert institution_order('MIREX') < institution_order('OTRA') == institution_order(None)


def test_compare_by_institution_is_symmetric_for_unknown():
    assert compare_by_institution({'institucion': 'ONU'}, {'institucion': None}) == 0
    assert compare_by_institution({'institucion': 'PN'}, {'institucion': 'ONU'}) == -1
    assert compare_by_institution({'institucion': 'ONU'}, {'institucion': 'ERD'}) == 1


def test_institution_only_breaks_rank_ties():
    personas = [
        {'rango': 'Cabo', 'institucion': 'PN'},
        {'rango': 'Coronel', 'institucion': 'MIDE'},
        {'rango': 'Cabo', 'institucion': 'ERD'},
        {'rango': 'Cabo', 'institucion': ''},
    ]
    ordenados = sort_by_rank(personas, por_institucion=True)
    assert [(p['rango'], p['institucion']) for p in ordenados] == [
        ('Coronel', 'MIDE'), ('Cabo', 'ERD'), ('Cabo', 'PN'), ('Cabo', ''),
    ]
    assert compare_by_rank_and_institution(personas[0], personas[0]) == 0


def test_functions_are_idempotent():
    assert classify_rank('Mayor') is classify_rank('Mayor')
    assert rank_order_key('Mayor') == rank_order_key('Mayor') == 500
    personas = [{'rango': 'Raso'}, {'rango': 'Marinero'}]
    assert sort_by_rank(personas) == sort_by_rank(personas)


def test_rango_choices_follow_hierarchy():
    assert RANGO_CHOICES[0] == ('Mayor General', 'Mayor General')
    assert RANGO_CHOICES[-1] == ('Civil', 'Civil')
    assert len(RANGO_CHOICES) == len(ORDEN_RANGOS)
