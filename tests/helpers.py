def create_habit(client, title, week_days):
    response = client.post("/habits", json={"title": title, "weekDays": week_days})
    assert response.status_code == 201
    return response


def get_day(client, date):
    response = client.get("/day", params={"date": date})
    assert response.status_code == 200
    return response.json()


def habit_id_by_title(client, date, title):
    for habit in get_day(client, date)["possibleHabits"]:
        if habit["title"] == title:
            return habit["id"]
    raise AssertionError(f"{title!r} is not possible on {date}")
