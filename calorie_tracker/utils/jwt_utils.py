from flask_jwt_extended import get_jwt_identity


def get_current_user_id():
    """
    User id carried in the `sub` claim of the identity provider's token
    """
    identity = get_jwt_identity()
    if identity is None:
        return None
    return str(identity)
