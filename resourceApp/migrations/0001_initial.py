import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('farmerApp', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Resource',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('resource_type', models.CharField(choices=[('water', 'Water'), ('fertilizer', 'Fertilizer'), ('pesticide', 'Pesticide')], max_length=20)),
                ('used', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('optimal', models.FloatField(validators=[django.core.validators.MinValueValidator(0)])),
                ('unit', models.CharField(max_length=20)),
                ('month', models.CharField(max_length=20)),
                ('year', models.IntegerField()),
                ('farmer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='resources', to='farmerApp.farmer')),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
