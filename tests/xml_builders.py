"""Helpers that build combined exports the way the SQL report emits them."""
from xml.sax.saxutils import escape


def layout_doc(name=None, body=""):
    name_attr = f' layoutname="{name}"' if name is not None else ""
    return f"<layout{name_attr}>{body}</layout>"


def section(name, *cols):
    label = f'<text><lang text="{name}"/></text>' if name is not None else ""
    return f"<section>{label}{''.join(cols)}</section>"


def col(field_id=None, label=None, name=None, req=None, readonly=None, hide=None, extra=""):
    attrs = ""
    for attr, value in (("fieldid", field_id), ("name", name), ("req", req),
                        ("readonly", readonly), ("hide", hide)):
        if value is not None:
            attrs += f' {attr}="{value}"'
    text = f'<text><lang text="{label}"/></text>' if label is not None else ""
    return f"<col{attrs}>{text}{extra}</col>"


def dependents(*options):
    return f"<dependents>{''.join(options)}</dependents>"


def option(on_value, *child_ids):
    deps = "".join(f'<dependent id="{child}"/>' for child in child_ids)
    return f'<option name="{on_value}">{deps}</option>'


def visibility(display_names):
    return f'<visibility><visibilityoption displaynames="{display_names}"/></visibility>'


def layout_entries(*layout_docs):
    return "".join(
        f"<Layout><LayoutXML>{escape(doc)}</LayoutXML></Layout>" for doc in layout_docs
    )


def new_edit_group(group_id, *layout_docs):
    gid = f' GroupID="{group_id}"' if group_id is not None else ""
    return f"<NewEditLayouts{gid}>{layout_entries(*layout_docs)}</NewEditLayouts>"


def detail_group(group_id, *layout_docs):
    gid = f' GroupID="{group_id}"' if group_id is not None else ""
    return (
        f"<DetailLayoutsGroup><DetailLayout{gid}>{layout_entries(*layout_docs)}"
        f"</DetailLayout></DetailLayoutsGroup>"
    )


def history_group(group_id, *layout_docs):
    gid = f' GroupID="{group_id}"' if group_id is not None else ""
    return (
        f"<HistoryLayoutsGroup><HistoryLayout{gid}>{layout_entries(*layout_docs)}"
        f"</HistoryLayout></HistoryLayoutsGroup>"
    )


def layouts_section(*groups):
    return f"<Layouts><Layouts>{''.join(groups)}</Layouts></Layouts>"


def db_field(field_id=None, **children):
    parts = [f"<FIELDID>{field_id}</FIELDID>"] if field_id is not None else []
    for tag, value in children.items():
        parts.append(f"<{tag}>{value}</{tag}>")
    return f"<Field>{''.join(parts)}</Field>"


def fields_section(*fields):
    return f"<Fields><Fields>{''.join(fields)}</Fields></Fields>"


def final_output(*sections):
    return f"<FinalOutput>{''.join(sections)}</FinalOutput>"
