from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Pos',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(db_index=True, max_length=255, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('type', models.CharField(choices=[('CAFE', 'Cafe'), ('VENDING_MACHINE', 'Vending Machine'), ('BAKERY', 'Bakery'), ('CAFETERIA', 'Cafeteria'), ('COFFEE', 'Coffee Shop')], max_length=20)),
                ('campus', models.CharField(choices=[('ALTSTADT', 'Altstadt'), ('BERGHEIM', 'Bergheim'), ('INF', 'Im Neuenheimer Feld'), ('MAIN', 'Main Campus')], max_length=20)),
                ('street', models.CharField(max_length=255)),
                ('house_number', models.CharField(max_length=10)),
                ('postal_code', models.PositiveIntegerField()),
                ('city', models.CharField(max_length=255)),
            ],
            options={
                'verbose_name': 'POS',
                'verbose_name_plural': 'POS',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['campus', 'type'], name='pos_campus_type_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('type__in', ['CAFE', 'VENDING_MACHINE', 'BAKERY', 'CAFETERIA', 'COFFEE'])), name='pos_type_valid'),
                    models.CheckConstraint(condition=models.Q(('campus__in', ['ALTSTADT', 'BERGHEIM', 'INF', 'MAIN'])), name='pos_campus_valid'),
                ],
            },
        ),
    ]
