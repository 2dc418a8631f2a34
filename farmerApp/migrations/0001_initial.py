from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import farmerApp.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Farmer',
            fields=[
                ('id', models.CharField(default=farmerApp.models.generate_farmer_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('location', models.CharField(max_length=255)),
                ('language', models.CharField(choices=[('en', 'English'), ('hi', 'Hindi')], default='en', max_length=5)),
                ('phone_number', models.CharField(blank=True, max_length=20, null=True)),
                ('farm_size', models.FloatField(blank=True, help_text='Farm size in acres', null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('user', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='farmer', to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
