import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="OpenProject",
            fields=[
                (
                    "created",
                    model_utils.fields.AutoCreatedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="created"
                    ),
                ),
                (
                    "modified",
                    model_utils.fields.AutoLastModifiedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="modified"
                    ),
                ),
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=127, verbose_name="name")),
                ("category", models.CharField(blank=True, max_length=127, verbose_name="category")),
                ("uri", models.SlugField(max_length=127, unique=True, verbose_name="uri")),
                ("home", models.CharField(blank=True, max_length=255, verbose_name="home page")),
                ("doc", models.CharField(blank=True, max_length=255, verbose_name="documentation")),
                ("download", models.CharField(blank=True, max_length=255, verbose_name="download")),
                ("src", models.CharField(blank=True, max_length=255, verbose_name="source")),
                ("logo", models.CharField(blank=True, max_length=255, verbose_name="logo")),
                ("desc", models.TextField(blank=True, verbose_name="description")),
                ("repo", models.CharField(blank=True, max_length=255, verbose_name="repository")),
                ("author", models.CharField(blank=True, max_length=127, verbose_name="author")),
                ("licence", models.CharField(blank=True, max_length=127, verbose_name="licence")),
                ("lang", models.CharField(blank=True, max_length=127, verbose_name="language")),
                ("os", models.CharField(blank=True, max_length=127, verbose_name="operating system")),
                ("tags", models.CharField(blank=True, max_length=127, verbose_name="tags")),
                ("viewnum", models.PositiveIntegerField(default=0, verbose_name="views")),
                ("cmtnum", models.PositiveIntegerField(default=0, verbose_name="comments")),
                ("likenum", models.IntegerField(default=0, verbose_name="likes")),
                ("lastreplyuid", models.PositiveBigIntegerField(default=0, verbose_name="last replier")),
                ("lastreplytime", models.DateTimeField(blank=True, null=True, verbose_name="last reply time")),
                (
                    "status",
                    models.PositiveSmallIntegerField(
                        choices=[(0, "new"), (1, "online"), (2, "offline")],
                        default=0,
                        verbose_name="status",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="projects",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="submitted by",
                    ),
                ),
            ],
            options={
                "verbose_name": "open source project",
                "verbose_name_plural": "open source projects",
                "ordering": ["-id"],
                "indexes": [models.Index(fields=["status", "-id"], name="project_status_id_idx")],
            },
        ),
    ]
