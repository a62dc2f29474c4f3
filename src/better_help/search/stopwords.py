"""Stopwords list for chat command search.

Query words found here carry no meaning on their own and are dropped
before term-overlap matching. Words common in bot commands (show, get,
list, open) are not stopwords.
"""

from typing import AbstractSet

# Standard English stopwords, lowercase, with and without apostrophes
STOPWORDS = frozenset({
    # Articles
    'a', 'an', 'the',

    # Pronouns
    'i', 'me', 'my', 'myself', 'mine',
    'we', 'us', 'our', 'ours', 'ourselves',
    'you', 'your', 'yours', 'yourself', 'yourselves',
    'he', 'him', 'his', 'himself',
    'she', 'her', 'hers', 'herself',
    'it', 'its', 'itself',
    'they', 'them', 'their', 'theirs', 'themselves',
    'this', 'that', 'these', 'those',
    'what', 'which', 'who', 'whom', 'whose',

    # Contracted pronouns
    "i'm", "i've", "i'd", "i'll", 'im', 'ive',
    "you're", "you've", "you'd", "you'll", 'youre',
    "he's", "he'd", "he'll", "she's", "she'd", "she'll",
    "it's", "we're", "we've", "we'd", "we'll",
    "they're", "they've", "they'd", "they'll", 'theyre',
    "that's", "there's", "here's", "what's", "who's",
    "where's", "when's", "why's", "how's", "let's", 'lets',

    # Prepositions
    'with', 'from', 'to', 'for', 'of', 'in', 'on', 'at', 'by', 'as',
    'into', 'onto', 'through', 'during', 'before', 'after', 'above',
    'below', 'between', 'under', 'over', 'again', 'against', 'further',
    'about', 'across', 'along', 'among', 'around', 'upon', 'within',
    'without', 'off', 'out', 'up', 'down', 'until', 'till', 'toward',
    'towards', 'via',

    # Conjunctions
    'and', 'or', 'but', 'nor', 'so', 'yet', 'if', 'than', 'because',
    'while', 'though', 'although', 'unless', 'whether',

    # Common verbs (be/have/do forms)
    'am', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'having',
    'do', 'does', 'did', 'doing', 'done',

    # Modal verbs
    'will', 'would', 'can', 'could', 'may', 'might',
    'shall', 'should', 'must', 'ought', 'cannot',

    # Negations and contracted verbs
    'no', 'not',
    "isn't", "aren't", "wasn't", "weren't", 'isnt', 'arent', 'wasnt', 'werent',
    "hasn't", "haven't", "hadn't", 'hasnt', 'havent', 'hadnt',
    "don't", "doesn't", "didn't", 'dont', 'doesnt', 'didnt',
    "won't", "wouldn't", "can't", "couldn't", "shan't", "shouldn't", "mustn't",
    'wont', 'wouldnt', 'cant', 'couldnt', 'shouldnt',

    # Other common words
    'where', 'when', 'why', 'how', 'all', 'any', 'both', 'each', 'few',
    'more', 'most', 'other', 'others', 'some', 'such', 'only', 'own',
    'same', 'too', 'very', 'else', 'every', 'either', 'neither',
    'much', 'many', 'several', 'whatever', 'whoever', 'whenever',

    # Common adverbs
    'here', 'there', 'now', 'then', 'once', 'just', 'also', 'always',
    'never', 'often', 'sometimes', 'already', 'still', 'even', 'ever',
    'however', 'anyhow', 'anyway', 'anyways', 'somehow', 'rather',
    'quite', 'perhaps', 'thus', 'therefore', 'hence', 'indeed',
    'please', 'really',
})


def is_stopword(word: str, stop_words: AbstractSet[str] = STOPWORDS) -> bool:
    """Check if a word is a stopword.

    Args:
        word: Word to check (will be lowercased)
        stop_words: Stopword set to check against (default: STOPWORDS)

    Returns:
        True if word is a stopword, False otherwise

    Example:
        >>> is_stopword('the')
        True
        >>> is_stopword('Anyhow')
        True
        >>> is_stopword('meme')
        False
    """
    return word.lower() in stop_words
