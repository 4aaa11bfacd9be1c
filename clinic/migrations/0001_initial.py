from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('city', models.CharField(db_index=True, max_length=20)),
                ('email', models.EmailField(max_length=254)),
                ('phone_number', models.CharField(max_length=32)),
                ('speciality', models.CharField(choices=[('ORTHOPAEDIC', 'Orthopaedic'), ('GYNECOLOGY', 'Gynecology'), ('DERMATOLOGY', 'Dermatology'), ('ENT', 'ENT')], max_length=20)),
            ],
            options={
                'ordering': ['id'],
                'indexes': [models.Index(fields=['city', 'speciality'], name='clinic_doctor_city_spec_idx')],
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('city', models.CharField(max_length=20)),
                ('email', models.EmailField(max_length=254)),
                ('phone_number', models.CharField(max_length=32)),
                ('symptom', models.CharField(choices=[('ARTHRITIS', 'Arthritis'), ('BACK_PAIN', 'Back pain'), ('TISSUE_INJURIES', 'Tissue injuries'), ('DYSMENORRHEA', 'Dysmenorrhea'), ('SKIN_INFECTION', 'Skin infection'), ('SKIN_BURN', 'Skin burn'), ('EAR_PAIN', 'Ear pain')], max_length=20)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
