from adapter.external.free_dictionary import FreeDictionaryAdapter
from port.dictionary import DictionaryPort


def get_dictionary_port() -> DictionaryPort:
    return FreeDictionaryAdapter()
