from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('login.urls')),
    path('panel/', include('Mandatarios.urls')),
    path('personal/', include('Personal.urls')),
]

handler404 = 'login.views.custom_404_view'
