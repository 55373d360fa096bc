from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='NepaliCalendar',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('bs_year', models.IntegerField(db_index=True, help_text='Bikram Sambat Year')),
                ('month', models.IntegerField(choices=[(1, 'Baisakh'), (2, 'Jestha'), (3, 'Ashadh'), (4, 'Shrawan'), (5, 'Bhadra'), (6, 'Ashwin'), (7, 'Kartik'), (8, 'Mangsir'), (9, 'Poush'), (10, 'Magh'), (11, 'Falgun'), (12, 'Chaitra')], db_index=True)),
                ('days_in_month', models.IntegerField(help_text='Number of days in this month')),
                ('ad_start_date', models.DateField(blank=True, help_text='Gregorian date when this BS month starts', null=True)),
            ],
            options={
                'verbose_name': 'Nepali Calendar Entry',
                'verbose_name_plural': 'Nepali Calendar',
                'ordering': ['bs_year', 'month'],
                'indexes': [models.Index(fields=['bs_year', 'month'], name='bs_calendar_year_month_idx')],
                'unique_together': {('bs_year', 'month')},
            },
        ),
    ]
