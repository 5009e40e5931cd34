""" Urls of the modules define here... """

# Python Packages
from flask_restx import Api

# All Namespaces...
from ..bot.handler import bot_namespace
from ..documents.handler import document_namespace, knowledge_namespace
from ..persona.handler import persona_namespace
from ..telegram.handler import telegram_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api: Api):
        """ Function for adding namespaces... """

        api.add_namespace(bot_namespace)
        api.add_namespace(document_namespace)
        api.add_namespace(knowledge_namespace)
        api.add_namespace(persona_namespace)
        api.add_namespace(telegram_namespace)
