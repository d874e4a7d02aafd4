import unicodedata

CAMPOS_BUSQUEDA = ('nombres', 'apellidos', 'rango', 'institucion', 'cedula', 'telefono')


def normalizar_texto(texto):
    """
    Pasa el texto a minúsculas y elimina los acentos, para que
    'capitan' encuentre 'Capitán'.
    """
    if not texto:
        return ''
    descompuesto = unicodedata.normalize('NFD', str(texto).lower())
    return ''.join(c for c in descompuesto if unicodedata.category(c) != 'Mn')


def coincide_busqueda(persona, consulta):
    termino = normalizar_texto((consulta or '').strip())
    if not termino:
        return True
    return any(termino in normalizar_texto(getattr(persona, campo, '')) for campo in CAMPOS_BUSQUEDA)
