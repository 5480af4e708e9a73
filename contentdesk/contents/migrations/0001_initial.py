import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import contents.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ContentTypeDefinitionModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Name')),
                ('display_name', models.CharField(max_length=255, verbose_name='Display Name')),
                (
                    'settings',
                    models.JSONField(
                        blank=True, default=contents.models._default_type_settings, verbose_name='Settings'
                    ),
                ),
            ],
            options={
                'verbose_name': 'Content Type Definition',
                'verbose_name_plural': 'Content Type Definitions',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ContentItemModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content_type', models.CharField(db_index=True, max_length=100, verbose_name='Content Type')),
                ('display_text', models.CharField(blank=True, default='', max_length=255, verbose_name='Display Text')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
                (
                    'owner',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='content_items',
                        to=settings.AUTH_USER_MODEL,
                        verbose_name='Owner',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Content Item',
                'verbose_name_plural': 'Content Items',
                'permissions': [
                    ('edit_content', 'Can edit content of all users'),
                    ('edit_own_content', 'Can edit own content'),
                ],
            },
        ),
    ]
