"""
Package de tests pour l'application Dream Analyzer.

Structure des tests :
├── test_core.py   - Tests critiques essentiels (propriétés garanties)
├── test_utils.py  - Tests des heuristiques (validation, classification, textes)
├── test_state.py  - Tests de l'état en mémoire du formulaire
├── test_forms.py  - Tests du formulaire
└── test_views.py  - Tests des vues Django (formulaire, SSE, fonds)

Aucune base de données : toutes les classes héritent de SimpleTestCase.

Commandes utiles :

# Lancer TOUS les tests
python manage.py test analyzer.tests

# Tests rapides critiques uniquement
python manage.py test analyzer.tests.test_core

# Rapport de couverture
coverage run --source='.' manage.py test analyzer.tests
coverage report
"""
