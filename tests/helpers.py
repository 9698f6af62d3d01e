from frontdesk.extensions import db


def login(client, user):
    with client.session_transaction() as sess:
        sess["_user_id"] = str(user.id)
        sess["_fresh"] = True


def flashes(client):
    with client.session_transaction() as sess:
        return list(sess.get("_flashes", []))


def reload(model, pk):
    db.session.expire_all()
    return db.session.get(model, pk)
