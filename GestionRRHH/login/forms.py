from django import forms
from django.contrib.auth.forms import PasswordChangeForm, UserCreationForm
from django.contrib.auth.models import Group
from Personal.models import Personal
from .models import UserProfile
from .permissions import ROLES, ROL_OBSERVADOR


class CustomUserCreationForm(UserCreationForm):
    email = forms.EmailField(required=False, label="Correo electrónico")

    rol = forms.ChoiceField(
        choices=list(ROLES.items()),
        initial=ROL_OBSERVADOR,
        label="Rol",
        help_text="Administrador gestiona usuarios; Usuario edita datos; Observador solo consulta."
    )

    personal = forms.ModelChoiceField(
        queryset=Personal.objects.filter(userprofile__isnull=True),
        required=False,
        label="Personal Asociado",
        help_text="Asocie este usuario a un registro existente del personal (opcional)."
    )

    class Meta(UserCreationForm.Meta):
        fields = ('username', 'email')

    def save(self, commit=True):
        user = super().save(commit=False)
        user.email = self.cleaned_data.get('email', '')
        if commit:
            user.save()
            grupo, _ = Group.objects.get_or_create(name=self.cleaned_data['rol'])
            user.groups.set([grupo])

            profile, _ = UserProfile.objects.get_or_create(user=user)
            personal = self.cleaned_data.get('personal')
            if personal:
                profile.personal = personal
                profile.save()
        return user


class CambiarClaveForm(PasswordChangeForm):
    """
    Cambio de contraseña del propio usuario. La nueva contraseña debe ser
    distinta de la actual.
    """
    def clean_new_password1(self):
        password = self.cleaned_data.get('new_password1')
        if password and self.user.check_password(password):
            raise forms.ValidationError("La nueva contraseña debe ser distinta de la actual.")
        return password
