from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("purchaser_name", models.CharField(max_length=255)),
                ("item_ids", models.JSONField(default=list)),
                ("quantities", models.JSONField(default=list)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
    ]
