from django.urls import path
from . import views

app_name = 'Personal'

urlpatterns = [
    path('', views.PersonalListView.as_view(), name='personal_list'),
    path('agregar/', views.PersonalCreateView.as_view(), name='personal_create'),
    path('<int:pk>/editar/', views.PersonalUpdateView.as_view(), name='personal_update'),
    path('<int:pk>/eliminar/', views.PersonalDeleteView.as_view(), name='personal_delete'),
    path('importar/', views.importar_excel, name='importar_excel'),
    path('analitica/', views.analytics, name='analytics'),
    path('analitica/exportar/', views.exportar_analytics, name='exportar_analytics'),
]
