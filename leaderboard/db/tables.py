# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import peewee as pw


database_proxy = pw.Proxy()


class BaseModel(pw.Model):
    class Meta:
        database = database_proxy


class Student(BaseModel):
    firstname = pw.TextField(null=False)
    lastname = pw.TextField(null=False)
    email = pw.TextField(null=False)
    level = pw.CharField(null=False)  # "Novice" or "Advanced"

    class Meta:
        table_name = "students"


class Competition(BaseModel):
    name = pw.TextField(null=False)

    class Meta:
        table_name = "competitions"


# No ForeignKeyField: results are only written after upserting their
# student and competition, and removals cascade by hand.  The implicit
# id gives insertion order.
class Result(BaseModel):
    student_id = pw.IntegerField(null=False)
    competition_id = pw.IntegerField(null=False)
    problems_solved = pw.IntegerField(null=False)
    placement = pw.IntegerField(null=False)

    class Meta:
        table_name = "results"
