def to_res_name(name: str) -> str:
    """Convert an asset name to a valid Android resource name.

    ASCII letters and digits are kept, uppercase letters are lowered and start a new
    "_"-separated word, and any other character becomes "_".

    >>> to_res_name("ic_24/paper_ID_leftAndroid 100%")
    'ic_24_paper_id_left_android_100_'
    """
    output = []
    previous_is_upper = False
    for i, ch in enumerate(name):
        if not (ch.isascii() and ch.isalnum()):
            output.append("_")
            previous_is_upper = True
        elif ch.isupper():
            if i > 0 and not previous_is_upper:
                output.append("_")
            output.append(ch.lower())
            previous_is_upper = True
        else:
            output.append(ch)
            previous_is_upper = False
    return "".join(output)
