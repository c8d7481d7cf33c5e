import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
        ('sales', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('call', 'Call'), ('email', 'Email'), ('meeting', 'Meeting'), ('site_visit', 'Site visit'), ('other', 'Other')], max_length=20)),
                ('description', models.TextField()),
                ('outcome', models.TextField(blank=True, default='')),
                ('next_steps', models.TextField(blank=True, default='')),
                ('contact_method', models.CharField(blank=True, default='', max_length=50)),
                ('contacted_by', models.CharField(blank=True, default='', max_length=255)),
                ('due_date', models.DateTimeField(blank=True, null=True)),
                ('completed', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to='customers.customer')),
                ('opportunity', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='activities', to='sales.opportunity')),
            ],
            options={
                'verbose_name_plural': 'activities',
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['created_at', 'id'], name='activity_feed_cursor_idx')],
            },
        ),
    ]
