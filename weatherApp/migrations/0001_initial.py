from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='WeatherData',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('location', models.CharField(max_length=255)),
                ('temperature', models.FloatField(help_text='Temperature in °C')),
                ('humidity', models.FloatField(blank=True, help_text='Relative humidity (%)', null=True)),
                ('rainfall', models.FloatField(blank=True, help_text='Rainfall in mm', null=True)),
                ('wind_speed', models.FloatField(blank=True, help_text='Wind speed in km/h', null=True)),
                ('condition', models.CharField(max_length=100)),
                ('forecast', models.JSONField(blank=True, default=list)),
                ('advisory', models.TextField(blank=True, null=True)),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name_plural': 'weather data',
                'ordering': ['-timestamp', '-id'],
            },
        ),
    ]
