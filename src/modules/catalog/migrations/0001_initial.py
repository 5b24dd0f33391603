from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CatalogEntry",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("item_name", models.CharField(max_length=255)),
                ("brand", models.CharField(max_length=255)),
                (
                    "star_rating",
                    models.SmallIntegerField(blank=True, default=None, null=True),
                ),
                (
                    "price",
                    models.BigIntegerField(blank=True, default=None, null=True),
                ),
                (
                    "quantity",
                    models.BigIntegerField(blank=True, default=None, null=True),
                ),
            ],
            options={
                "verbose_name_plural": "catalog entries",
                "db_table": "catalog",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
    ]
