from marshmallow import fields

from referral_leaderboard.extensions import ma


class LeaderboardEntrySchema(ma.Schema):
    id = fields.String()
    user_id = fields.String(data_key="userId")
    referral_count = fields.Integer(data_key="referralCount")
    rank = fields.Integer()


class LeaderboardRowSchema(LeaderboardEntrySchema):
    """Entry as shown on the page, with its rank movement since the last reload."""

    movement = fields.Integer()


entry_schema = LeaderboardEntrySchema()
entries_schema = LeaderboardEntrySchema(many=True)
rows_schema = LeaderboardRowSchema(many=True)
