import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MaintenanceRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('machine_id', models.CharField(max_length=100)),
                ('serial_number', models.CharField(max_length=100)),
                ('machine_type', models.CharField(max_length=100)),
                ('maintenance_type', models.CharField(help_text='preventive, repair, install, ...', max_length=100)),
                ('description', models.TextField()),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('in-progress', 'In progress'), ('done', 'Done')], db_index=True, default='pending', max_length=20)),
                ('technician_notes', models.TextField(blank=True, default='')),
                ('parts_used', models.JSONField(blank=True, default=list)),
                ('cost', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('labor_cost', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('parts_cost', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('scheduled_date', models.DateTimeField()),
                ('completed_date', models.DateTimeField(blank=True, null=True)),
                ('next_maintenance_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='maintenance_records', to='customers.customer')),
            ],
            options={
                'ordering': ['-scheduled_date', '-id'],
            },
        ),
    ]
