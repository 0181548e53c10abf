import re

from urllib.parse import quote

_URI_TEMPLATE_VARIABLE = re.compile(r'{([^}]+)}')


def expand_uri_template(template, params=None):
    """
    Expands simple ``{name}`` variables in a relation href.

    Variables without a matching value are left in place so that a partially expanded
    template can be expanded further.
    """
    if not params:
        return template

    def replace(match):
        name = match.group(1)
        if name not in params:
            return match.group(0)
        return quote(str(params[name]), safe='')

    return _URI_TEMPLATE_VARIABLE.sub(replace, template)


def uri_template_variables(template):
    return _URI_TEMPLATE_VARIABLE.findall(template)


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__
