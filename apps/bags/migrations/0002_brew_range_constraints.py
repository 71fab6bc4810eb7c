# Generated manually for bags app

from django.db import migrations, models


def range_check(field, low, high):
    return models.CheckConstraint(
        condition=models.Q(**{f'{field}__isnull': True}) | models.Q(**{f'{field}__gte': low, f'{field}__lte': high}),
        name=f'brew_{field}_in_range',
    )


class Migration(migrations.Migration):

    dependencies = [
        ('bags', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(model_name='brew', constraint=range_check('dose', 0, 1000)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('grind_setting', 0, 1000)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('water_amount', 0, 5000)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('rating', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('nutty', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('acidity', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('fruity', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('floral', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('sweetness', 0, 5)),
        migrations.AddConstraint(model_name='brew', constraint=range_check('chocolate', 0, 5)),
    ]
