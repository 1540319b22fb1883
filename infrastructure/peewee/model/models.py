from peewee import Model, CharField, DateTimeField, TextField
from infrastructure.peewee.session.db import db

class TareaModel(Model):
    id = CharField(primary_key=True, max_length=32)
    status = CharField(default="PENDIENTE")
    description = TextField(null=True)
    # Atributos descriptivos serializados como JSON.
    atributos = TextField(default="{}")
    date = DateTimeField(null=True)

    class Meta:
        database = db
        table_name = "tasks"
