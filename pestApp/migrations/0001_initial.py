from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PestDisease',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('type', models.CharField(choices=[('pest', 'Pest'), ('disease', 'Disease')], max_length=10)),
                ('crop_affected', models.CharField(max_length=100)),
                ('symptoms', models.JSONField(default=list)),
                ('severity', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], max_length=10)),
                ('treatment', models.TextField()),
                ('prevention', models.TextField(blank=True, null=True)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
            ],
            options={
                'verbose_name': 'pest or disease',
                'verbose_name_plural': 'pests and diseases',
                'ordering': ['id'],
            },
        ),
    ]
