from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="InfrastructureObjectRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("api_version", models.CharField(max_length=255)),
                ("group", models.CharField(blank=True, default="", max_length=253)),
                ("kind", models.CharField(max_length=63)),
                ("namespace", models.CharField(max_length=63)),
                ("name", models.CharField(max_length=253)),
                ("annotations", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "kcp_infrastructure_objects",
                "ordering": ["group", "kind", "namespace", "name", "id"],
                "indexes": [
                    models.Index(fields=["namespace", "name"], name="idx_infra_ns_name"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("group", "kind", "namespace", "name"),
                        name="uq_infra_object_identity",
                    ),
                ],
            },
        ),
    ]
