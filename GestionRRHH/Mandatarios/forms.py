from django import forms
from Personal.models import Personal
from Personal.rangos import sort_by_rank
from .models import Asignacion, EquipoRequerido, Mandatario, Recordatorio


class MandatarioForm(forms.ModelForm):
    class Meta:
        model = Mandatario
        fields = ['nombre', 'pais']
        widgets = {
            'nombre': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nombre completo'}),
            'pais': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Ej: República Dominicana'}),
        }


class EquipoRequeridoForm(forms.ModelForm):
    """Agrega una función al equipo requerido de un mandatario ya conocido."""

    def __init__(self, *args, mandatario=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.mandatario = mandatario

    class Meta:
        model = EquipoRequerido
        fields = ['funcion']
        widgets = {
            'funcion': forms.Select(attrs={'class': 'form-select'}),
        }

    def clean_funcion(self):
        funcion = self.cleaned_data.get('funcion')
        if funcion and EquipoRequerido.objects.filter(mandatario=self.mandatario, funcion=funcion).exists():
            raise forms.ValidationError("Esta función ya forma parte del equipo requerido.")
        return funcion

    def save(self, commit=True):
        requerido = super().save(commit=False)
        requerido.mandatario = self.mandatario
        if commit:
            requerido.save()
        return requerido


class AsignacionForm(forms.ModelForm):
    class Meta:
        model = Asignacion
        fields = ['mandatario', 'funcion', 'personal']
        widgets = {
            'mandatario': forms.Select(attrs={'class': 'form-select'}),
            'funcion': forms.Select(attrs={'class': 'form-select'}),
            'personal': forms.Select(attrs={'class': 'form-select select2'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # Lista el personal en orden jerárquico en lugar del orden de la tabla
        personas = sort_by_rank(Personal.objects.all(), por_institucion=True)
        self.fields['personal'].choices = [('', '---------')] + [(p.pk, str(p)) for p in personas]


class RecordatorioForm(forms.ModelForm):
    class Meta:
        model = Recordatorio
        fields = ['titulo', 'descripcion', 'fecha', 'prioridad']
        widgets = {
            'titulo': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Ej: Reunión de coordinación'}),
            'descripcion': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'fecha': forms.DateTimeInput(attrs={'class': 'form-control', 'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),
            'prioridad': forms.Select(attrs={'class': 'form-select'}),
        }
