from django import forms
from django.utils.html import format_html, format_html_join

from .models import Personal
from .rangos import INSTITUCIONES, RANGO_CHOICES


class SugerenciasInput(forms.TextInput):
    """
    Campo de texto libre con una <datalist> de valores sugeridos.
    El navegador ofrece las sugerencias pero acepta cualquier texto.
    """

    def __init__(self, sugerencias=(), attrs=None):
        super().__init__(attrs)
        self.sugerencias = list(sugerencias)

    def render(self, name, value, attrs=None, renderer=None):
        lista_id = f"{name}-sugerencias"
        attrs = {**(attrs or {}), 'list': lista_id}
        campo = super().render(name, value, attrs, renderer)
        opciones = format_html_join('', '<option value="{}"></option>', ((s,) for s in self.sugerencias))
        return format_html('{}<datalist id="{}">{}</datalist>', campo, lista_id, opciones)


class PersonalForm(forms.ModelForm):
    # Formulario para crear y actualizar registros del personal.
    # Rango e institución son texto libre: los valores desconocidos se ordenan al final.

    class Meta:
        model = Personal
        fields = [
            'rango', 'nombres', 'apellidos', 'cedula', 'institucion',
            'genero', 'nacionalidad', 'telefono', 'grupo',
        ]
        widgets = {
            'rango': SugerenciasInput([rango for rango, _ in RANGO_CHOICES], attrs={'placeholder': 'Ej: Coronel'}),
            'institucion': SugerenciasInput(INSTITUCIONES, attrs={'placeholder': 'Ej: ERD'}),
            'nombres': forms.TextInput(attrs={'placeholder': 'Nombres'}),
            'apellidos': forms.TextInput(attrs={'placeholder': 'Apellidos'}),
            'cedula': forms.TextInput(attrs={'placeholder': 'Ej: 001-0000000-1'}),
            'nacionalidad': forms.TextInput(attrs={'placeholder': 'Ej: Dominicana'}),
            'telefono': forms.TextInput(attrs={'placeholder': 'Ej: 809-000-0000'}),
        }
