import logging

from django.contrib import messages
from django.contrib.auth.decorators import user_passes_test
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from login.permissions import (
    EscrituraRequiredMixin, LecturaRequiredMixin, has_escritura_access, has_lectura_access,
)
from .analytics import TODOS, calcular_metricas, filtrar_personal
from .forms import PersonalForm
from .models import Personal
from .rangos import INSTITUCIONES, RankCategory, sort_by_rank
from .reportes import (
    COLUMNAS_PERSONAL, ImportacionError, filas_personal, importar_personal,
    nombre_archivo_filtrado, respuesta_excel,
)
from .utils import coincide_busqueda

logger = logging.getLogger(__name__)

lectura_required = user_passes_test(has_lectura_access, login_url='login:login')
escritura_required = user_passes_test(has_escritura_access, login_url='login:login')


# --- Personal ---

class PersonalListView(LecturaRequiredMixin, ListView):
    model = Personal
    template_name = 'Personal/personal_list.html'
    context_object_name = 'personal'
    paginate_by = 20

    def get_queryset(self):
        # El orden jerárquico no se expresa en SQL; se ordena en memoria.
        queryset = super().get_queryset().select_related('grupo')
        q = self.request.GET.get('q', '')
        personas = [p for p in queryset if coincide_busqueda(p, q)]
        return sort_by_rank(personas, por_institucion=True)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Personal'
        context['search_query'] = self.request.GET.get('q', '')
        return context


class PersonalCreateView(EscrituraRequiredMixin, CreateView):
    model = Personal
    form_class = PersonalForm
    template_name = 'Personal/personal_form.html'
    success_url = reverse_lazy('Personal:personal_list')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Agregar Personal'
        return context

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Personal {self.object.pk} creado por {self.request.user.username}.")
        return response


class PersonalUpdateView(EscrituraRequiredMixin, UpdateView):
    model = Personal
    form_class = PersonalForm
    template_name = 'Personal/personal_form.html'
    success_url = reverse_lazy('Personal:personal_list')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = f'Editar Personal: {self.object}'
        return context


class PersonalDeleteView(EscrituraRequiredMixin, DeleteView):
    model = Personal
    template_name = 'Personal/personal_confirm_delete.html'
    success_url = reverse_lazy('Personal:personal_list')


# --- Analítica ---

def _filtros(request):
    return {
        'institucion': request.GET.get('institucion', TODOS),
        'categoria': request.GET.get('categoria', TODOS),
        'genero': request.GET.get('genero', TODOS),
    }


@lectura_required
def analytics(request):
    filtros = _filtros(request)
    personas = filtrar_personal(Personal.objects.all(), **filtros)
    context = {
        'titulo': 'Analítica de Personal',
        'personal': personas,
        'metricas': calcular_metricas(personas),
        'filtros': filtros,
        'instituciones': INSTITUCIONES,
        'categorias': [c.value for c in RankCategory],
        'generos': [g for g, _ in Personal.GENERO_CHOICES],
    }
    return render(request, 'Personal/analytics.html', context)


@lectura_required
def exportar_analytics(request):
    filtros = _filtros(request)
    personas = filtrar_personal(Personal.objects.all(), **filtros)
    if not personas:
        messages.warning(request, 'No hay datos para exportar.')
        return redirect('Personal:analytics')
    logger.info(f"Exportando {len(personas)} registros de personal filtrado ({filtros}).")
    return respuesta_excel(
        filas_personal(personas),
        'Personal_Filtrado',
        nombre_archivo_filtrado(**filtros),
        columnas=list(COLUMNAS_PERSONAL),
    )


# --- Importación Excel ---

@escritura_required
def importar_excel(request):
    if request.method == 'POST' and request.FILES.get('archivo_excel'):
        try:
            importados, omitidos = importar_personal(request.FILES['archivo_excel'])
            messages.success(
                request,
                f'Importación completada: {importados} registros nuevos, {omitidos} omitidos.'
            )
            return redirect('Personal:personal_list')
        except ImportacionError as e:
            logger.error(f"Error al importar personal: {e}")
            messages.error(request, f'Error al procesar el archivo: {e}')

    return render(request, 'Personal/importar_excel.html', {'titulo': 'Importar Personal'})
