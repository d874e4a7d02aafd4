from django.db import models
from django.contrib.auth.models import User
from Personal.models import Personal
from django.db.models.signals import post_save
from django.dispatch import receiver


class UserProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    # La asociación con un registro del personal es opcional
    personal = models.OneToOneField(Personal, on_delete=models.SET_NULL, null=True, blank=True)

    def __str__(self):
        return self.user.username


# Garantiza que cada User tenga su UserProfile, incluso los creados con createsuperuser.
@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.get_or_create(user=instance)
