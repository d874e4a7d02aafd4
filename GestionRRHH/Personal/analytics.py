from collections import Counter

from .rangos import INSTITUCIONES, RankCategory, classify_rank, rank_order_key

TODOS = 'all'


def filtrar_personal(personas, institucion=TODOS, categoria=TODOS, genero=TODOS):
    """
    Aplica los filtros de la pantalla de analítica y ordena por rango.
    La categoría se compara por su etiqueta ('Oficiales Superiores', ...).
    """
    filtrado = list(personas)
    if institucion != TODOS:
        filtrado = [p for p in filtrado if p.institucion == institucion]
    if categoria != TODOS:
        filtrado = [p for p in filtrado if classify_rank(p.rango).value == categoria]
    if genero != TODOS:
        filtrado = [p for p in filtrado if p.genero == genero]
    filtrado.sort(key=lambda p: rank_order_key(p.rango))
    return filtrado


def calcular_metricas(personas):
    por_institucion = Counter(p.institucion for p in personas)
    por_genero = Counter(p.genero for p in personas)
    por_categoria = Counter(classify_rank(p.rango) for p in personas)
    return {
        'total': len(personas),
        'por_institucion': {inst: por_institucion.get(inst, 0) for inst in INSTITUCIONES},
        'por_genero': {
            'Masculino': por_genero.get('Masculino', 0),
            'Femenino': por_genero.get('Femenino', 0),
        },
        'por_categoria': {cat.value: por_categoria.get(cat, 0) for cat in RankCategory},
    }
