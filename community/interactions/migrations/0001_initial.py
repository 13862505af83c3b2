import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations
from django.db import models

OBJTYPE_CHOICES = [
    (0, "topic"),
    (1, "article"),
    (2, "resource"),
    (3, "wiki"),
    (4, "project"),
    (5, "book"),
]


def base_fields():
    return [
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
        ("objid", models.PositiveBigIntegerField(verbose_name="object id")),
        ("objtype", models.PositiveSmallIntegerField(choices=OBJTYPE_CHOICES, verbose_name="object type")),
    ]


def user_field(related_name):
    return (
        "user",
        models.ForeignKey(
            on_delete=django.db.models.deletion.CASCADE,
            related_name=related_name,
            to=settings.AUTH_USER_MODEL,
            verbose_name="user",
        ),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Like",
            fields=[
                *base_fields(),
                (
                    "flag",
                    models.PositiveSmallIntegerField(
                        choices=[(1, "like"), (2, "dislike")], default=1, verbose_name="flag"
                    ),
                ),
                user_field("likes"),
            ],
            options={
                "verbose_name": "like",
                "verbose_name_plural": "likes",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "objid", "objtype"), name="unique_like_per_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Favorite",
            fields=[
                *base_fields(),
                user_field("favorites"),
            ],
            options={
                "verbose_name": "favorite",
                "verbose_name_plural": "favorites",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "objid", "objtype"), name="unique_favorite_per_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                *base_fields(),
                ("content", models.TextField(verbose_name="content")),
                ("floor", models.PositiveIntegerField(verbose_name="floor")),
                user_field("comments"),
            ],
            options={
                "verbose_name": "comment",
                "verbose_name_plural": "comments",
                "ordering": ["objtype", "objid", "floor"],
                "constraints": [
                    models.UniqueConstraint(fields=("objid", "objtype", "floor"), name="unique_comment_floor"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ViewRecord",
            fields=[
                *base_fields(),
                user_field("view_records"),
            ],
            options={
                "verbose_name": "view record",
                "verbose_name_plural": "view records",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "objid", "objtype"), name="unique_view_record_per_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ViewSource",
            fields=[
                *base_fields(),
                ("google", models.PositiveIntegerField(default=0)),
                ("baidu", models.PositiveIntegerField(default=0)),
                ("bing", models.PositiveIntegerField(default=0)),
                ("sogou", models.PositiveIntegerField(default=0)),
                ("so", models.PositiveIntegerField(default=0)),
                ("other", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "view source",
                "verbose_name_plural": "view sources",
                "constraints": [
                    models.UniqueConstraint(fields=("objid", "objtype"), name="unique_view_source"),
                ],
            },
        ),
    ]
