from enum import Enum
from functools import cmp_to_key


class RankCategory(str, Enum):
    OFICIALES_GENERALES = "Oficiales Generales"
    OFICIALES_SUPERIORES = "Oficiales Superiores"
    OFICIALES_SUBALTERNOS = "Oficiales Subalternos"
    ALISTADOS = "Alistados"
    ASIMILADOS = "Asimilados"
    CIVILES = "Civiles"
    OTROS = "Otros"


CATEGORIAS_RANGO = {
    RankCategory.OFICIALES_GENERALES: ('Mayor General', 'General de Brigada'),
    RankCategory.OFICIALES_SUPERIORES: (
        'Coronel', 'Capitán de Navio',
        'Teniente Coronel', 'Capitán de Fragata',
        'Mayor', 'Capitán de Corbeta',
    ),
    RankCategory.OFICIALES_SUBALTERNOS: (
        'Capitán', 'Teniente de Navio',
        '1er. Teniente', 'Tte. de Fragata',
        '2do.Teniente', 'Tte. de Corbeta',
    ),
    RankCategory.ALISTADOS: ('Sargento Mayor', 'Sargento', 'Cabo', 'Raso', 'Marinero'),
    RankCategory.ASIMILADOS: ('Asimilado Militar', 'Asimilado'),
    RankCategory.CIVILES: ('Civil',),
}

# Bandas de cien por nivel jerárquico; el +1 marca el rango equivalente de otra institución.
ORDEN_RANGOS = (
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
)

SENTINEL_ORDER = 9999

RANK_ORDER = dict(ORDEN_RANGOS)

RANK_CATEGORY = {
    rango: categoria
    for categoria, rangos in CATEGORIAS_RANGO.items()
    for rango in rangos
}

RANGO_CHOICES = [(rango, rango) for rango, _ in ORDEN_RANGOS]

INSTITUCIONES = ('ERD', 'ARD', 'FARD', 'PN', 'MIDE', 'MIREX')


def _campo(registro, nombre):
    if isinstance(registro, dict):
        return registro.get(nombre)
    return getattr(registro, nombre, None)


def classify_rank(rango=None):
    """
    Devuelve la categoría jerárquica de un rango.
    La búsqueda es por coincidencia exacta; rangos vacíos o desconocidos caen en OTROS.
    """
    if not rango:
        return RankCategory.OTROS
    return RANK_CATEGORY.get(rango, RankCategory.OTROS)


def rank_order_key(rango=None):
    """
    Convierte un rango en la clave numérica de ordenamiento.
    Números menores representan rangos más altos; los desconocidos reciben 9999.
    """
    if not rango:
        return SENTINEL_ORDER
    return RANK_ORDER.get(rango, SENTINEL_ORDER)


def rank_band(rango=None):
    orden = rank_order_key(rango)
    if orden == SENTINEL_ORDER:
        return SENTINEL_ORDER
    return orden // 100 * 100


def _cmp(a, b):
    return (a > b) - (a < b)


def compare_by_rank(a, b):
    return _cmp(rank_order_key(_campo(a, 'rango')), rank_order_key(_campo(b, 'rango')))


def institution_order(institucion=None):
    if institucion in INSTITUCIONES:
        return INSTITUCIONES.index(institucion)
    return len(INSTITUCIONES)


def compare_by_institution(a, b):
    return _cmp(
        institution_order(_campo(a, 'institucion')),
        institution_order(_campo(b, 'institucion')),
    )


def compare_by_rank_and_institution(a, b):
    return compare_by_rank(a, b) or compare_by_institution(a, b)


def sort_by_rank(registros, por_institucion=False):
    comparador = compare_by_rank_and_institution if por_institucion else compare_by_rank
    return sorted(registros, key=cmp_to_key(comparador))
