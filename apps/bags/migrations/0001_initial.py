# Generated manually for bags app

import uuid
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Bag',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.UUIDField(db_index=True)),
                ('coffee_name', models.CharField(max_length=200)),
                ('roaster', models.CharField(max_length=200)),
                ('origin', models.CharField(blank=True, max_length=200, null=True)),
                ('process', models.CharField(blank=True, max_length=100, null=True)),
                ('roast_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('ARCHIVED', 'Archived')], default='ACTIVE', max_length=10)),
                ('archived_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'bags',
                'ordering': ['updated_at'],
                'indexes': [models.Index(fields=['user_id', 'status', 'updated_at'], name='bags_owner_status_idx')],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(('status', 'ARCHIVED'), ('archived_at__isnull', False)),
                            models.Q(('status', 'ACTIVE'), ('archived_at__isnull', True)),
                            _connector='OR',
                        ),
                        name='bag_archived_at_matches_status',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='Brew',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('method', models.CharField(max_length=100)),
                ('brewer', models.CharField(blank=True, max_length=200, null=True)),
                ('grinder', models.CharField(blank=True, max_length=200, null=True)),
                ('dose', models.IntegerField(blank=True, null=True)),
                ('grind_setting', models.IntegerField(blank=True, null=True)),
                ('water_amount', models.IntegerField(blank=True, null=True)),
                ('rating', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('nutty', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('acidity', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('fruity', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('floral', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('sweetness', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('chocolate', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(5)])),
                ('flavour_notes', models.TextField(blank=True, null=True)),
                ('is_best', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('bag', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='brews', to='bags.bag')),
            ],
            options={
                'db_table': 'brews',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['bag', 'created_at'], name='brews_bag_created_idx')],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('is_best', True)), fields=('bag',), name='one_best_brew_per_bag'),
                ],
            },
        ),
    ]
