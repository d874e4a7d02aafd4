import io
import logging

import pandas as pd
from django.http import HttpResponse

from .models import Personal

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Columna de la hoja -> campo del modelo
COLUMNAS_PERSONAL = {
    'Rango': 'rango',
    'Apellidos': 'apellidos',
    'Nombres': 'nombres',
    'Institución': 'institucion',
    'Cédula': 'cedula',
    'Género': 'genero',
    'Teléfono': 'telefono',
    'Nacionalidad': 'nacionalidad',
}


class ImportacionError(ValueError):
    pass


def filas_personal(personas):
    return [
        {columna: getattr(persona, campo) or '' for columna, campo in COLUMNAS_PERSONAL.items()}
        for persona in personas
    ]


def exportar_excel(filas, hoja, columnas=None):
    """Genera el contenido de un .xlsx con una sola hoja."""
    df = pd.DataFrame(filas, columns=columnas)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        df.to_excel(writer, sheet_name=hoja, index=False)
    return buffer.getvalue()


def respuesta_excel(filas, hoja, nombre_archivo, columnas=None):
    response = HttpResponse(exportar_excel(filas, hoja, columnas), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{nombre_archivo}"'
    return response


def nombre_archivo_filtrado(institucion='all', categoria='all', genero='all'):
    nombre = "Personal_Filtrado"
    if institucion != 'all':
        nombre += f"_{institucion}"
    if categoria != 'all':
        nombre += "_" + "_".join(categoria.split())
    if genero != 'all':
        nombre += f"_{genero}"
    return nombre + ".xlsx"


def _valor(row, columna):
    valor = row.get(columna)
    if valor is None or pd.isna(valor):
        return ''
    if isinstance(valor, float) and valor.is_integer():
        valor = int(valor)
    return str(valor).strip()


def importar_personal(archivo):
    """
    Lee una hoja de personal y crea los registros cuya cédula aún no existe.
    Devuelve (importados, omitidos).
    """
    try:
        df = pd.read_excel(archivo)
    except Exception as e:
        raise ImportacionError(f"No fue posible leer el archivo: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    faltantes = [c for c in ('Cédula', 'Nombres') if c not in df.columns]
    if faltantes:
        raise ImportacionError(f"Columnas obligatorias ausentes: {', '.join(faltantes)}")

    importados = 0
    omitidos = 0
    for _, row in df.iterrows():
        datos = {campo: _valor(row, columna) for columna, campo in COLUMNAS_PERSONAL.items()}
        if not datos['cedula'] or not datos['nombres']:
            omitidos += 1
            continue
        if Personal.objects.filter(cedula=datos['cedula']).exists():
            omitidos += 1
            continue
        Personal.objects.create(**datos)
        importados += 1

    logger.info(f"Importación de personal: {importados} creados, {omitidos} omitidos.")
    return importados, omitidos
