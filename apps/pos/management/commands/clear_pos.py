from django.core.management.base import BaseCommand, CommandError

from apps.pos import services


class Command(BaseCommand):
    help = 'Delete all POS records (test support; never exposed over HTTP)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--yes',
            action='store_true',
            help='Skip the confirmation prompt'
        )

    def handle(self, *args, **options):
        if not options['yes']:
            answer = input('Delete all POS? [y/N] ')
            if answer.strip().lower() not in ('y', 'yes'):
                raise CommandError('Aborted.')

        deleted = services.clear()
        self.stdout.write(
            self.style.SUCCESS(f'Deleted {deleted} POS.')
        )
