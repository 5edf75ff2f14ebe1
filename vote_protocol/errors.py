class BallotError(ValueError):
    """Exception de base pour toute violation du contrat d'appel du protocole"""
    pass

class InvalidParametersError(BallotError):
    """Paramètres cryptographiques de l'élection invalides (premier, générateur, tailles)"""
    pass

class InvalidSelectionError(BallotError):
    """Sélection de candidats invalide (doublon, indice hors bornes, politique de vote)"""
    pass

class MissingSharesError(BallotError):
    """Parts des collecteurs absentes ou incomplètes"""
    pass
