from datetime import date

import pandas as pd

import pgsql_builder as pgsql

# A base listing refined by optional request filters.
query = pgsql.select("id, name, signed_up").from_("people").order("name asc")

team_id = 3
since = date(2024, 1, 1)

filters = pgsql.SelectStatement()
if team_id is not None:
    filters.where("team_id = ?", team_id)
if since is not None:
    filters.where("signed_up >= ?", since)

query.apply(filters).apply(pgsql.replace_order("signed_up desc").limit(20))
sql, args = pgsql.build(query)
print(sql)
print(args)

signups = pd.DataFrame(
    {
        "name": ["Ann", "Bob"],
        "team_id": [team_id, team_id],
        "signed_up": [pd.Timestamp("2024-02-01"), pd.NaT],
    }
)
sql, args = pgsql.build(pgsql.insert(pgsql.Ident("public", "people")).frame(signups).returning("id"))
print(sql)
print(args)

sql, args = pgsql.build(pgsql.delete("people").where("team_id = ?", team_id).returning("id"))
print(sql)
print(args)
