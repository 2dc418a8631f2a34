from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Crop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('season', models.CharField(max_length=100)),
                ('soil_type', models.CharField(max_length=50)),
                ('water_requirement', models.CharField(max_length=50)),
                ('expected_yield', models.FloatField(blank=True, help_text='Expected yield in kg', null=True)),
                ('profit_estimate', models.FloatField(blank=True, help_text='Estimated profit in INR', null=True)),
                ('growth_duration', models.IntegerField(blank=True, help_text='Growth duration in days', null=True)),
                ('description', models.TextField(blank=True, null=True)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
