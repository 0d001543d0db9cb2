def authorize(owner_id, record_owner_id):
    """
    ``True`` solo si el registro pertenece al usuario que lo pide.

    Nunca lanza: quien llama convierte ``False`` en "no encontrado o no
    autorizado", sin distinguir entre ambos casos.
    """
    if owner_id is None or record_owner_id is None:
        return False
    return owner_id == record_owner_id
