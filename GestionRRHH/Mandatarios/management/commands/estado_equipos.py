from django.core.management.base import BaseCommand
from Mandatarios.equipo import estado_equipos


class Command(BaseCommand):
    help = 'Muestra el estado del equipo de cada mandatario y las funciones que faltan por cubrir.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--incompletos',
            action='store_true',
            help='Lista solo los mandatarios con el equipo incompleto.',
        )

    def handle(self, *args, **options):
        equipos = estado_equipos()
        if options['incompletos']:
            equipos = [(m, estado) for m, estado in equipos if not estado.is_complete]

        for mandatario, estado in equipos:
            linea = f"{mandatario}: {estado.estado} ({estado.assigned_count}/{estado.required_count})"
            if estado.is_complete:
                self.stdout.write(self.style.SUCCESS(linea))
            else:
                faltantes = ', '.join(r.funcion.nombre for r in estado.missing)
                self.stdout.write(self.style.WARNING(f"{linea} - faltan: {faltantes}"))

        completos = sum(1 for _, estado in equipos if estado.is_complete)
        self.stdout.write(f'{len(equipos)} mandatarios, {completos} con equipo completo.')
