# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for form elements."""

import pytest

from genro_htmltag import (
    AttributeInvalidValue,
    Button,
    Form,
    Input,
    InputCheckbox,
    InputEmail,
    InputRadio,
    InputText,
    TextArea,
    ValueNotInAllowedSet,
)
from genro_htmltag.values import ButtonCommand, ButtonType, InputType, Wrap


class TestButton:
    """Tests for <button>."""

    def test_render_empty(self):
        """Button is inline."""
        assert Button.create().render() == '<button></button>'

    def test_content_escaped(self):
        """Content is HTML-escaped."""
        assert Button.create().content('<value>').render() == '<button>&lt;value&gt;</button>'

    def test_type(self):
        """type accepts button, reset and submit."""
        assert Button.create().type('submit').content('Save').render() == (
            '<button type="submit">Save</button>'
        )
        assert Button.create().type(ButtonType.RESET).get_attribute('type') == 'reset'

    def test_type_invalid(self):
        """Unknown types are rejected by the setter and set_attribute."""
        with pytest.raises(ValueNotInAllowedSet) as exc_info:
            Button.create().type('invalid-value')
        assert str(exc_info.value) == (
            "`invalid-value` is not a valid value for `type`. "
            "Allowed values are: 'button', 'reset', 'submit'."
        )
        with pytest.raises(ValueNotInAllowedSet):
            Button.create().set_attribute('type', 'invalid-value')

    def test_disabled_name_value(self):
        """Common control attributes."""
        tag = Button.create().name('action').value('save').disabled()
        assert tag.render() == '<button name="action" value="save" disabled></button>'

    def test_command(self):
        """Built-in commands are validated, custom ones start with '--'."""
        tag = Button.create().command(ButtonCommand.SHOW_MODAL).commandfor('dialog')
        assert tag.get_attributes() == {'command': 'show-modal', 'commandfor': 'dialog'}
        assert Button.create().command('--rotate').get_attribute('command') == '--rotate'
        with pytest.raises(ValueNotInAllowedSet):
            Button.create().command('explode')

    def test_form_overrides(self):
        """formtarget and formmethod use the global value sets."""
        tag = Button.create().formaction('/x').formmethod('post').formtarget('_blank').formnovalidate()
        assert tag.render() == (
            '<button formaction="/x" formmethod="post" formtarget="_blank" formnovalidate></button>'
        )
        with pytest.raises(ValueNotInAllowedSet):
            Button.create().formtarget('frame')

    def test_popover_target(self):
        """popovertargetaction is validated."""
        tag = Button.create().popovertarget('menu').popovertargetaction('toggle')
        assert tag.get_attributes() == {'popovertarget': 'menu', 'popovertargetaction': 'toggle'}
        with pytest.raises(ValueNotInAllowedSet):
            Button.create().popovertargetaction('flip')


class TestAriaDescribedBy:
    """aria-describedby expansion on form controls."""

    def test_expands_from_id(self):
        """True becomes '<id>-help'."""
        tag = Button.create().id('button').add_aria_attribute('describedby', True)
        assert tag.render() == '<button id="button" aria-describedby="button-help"></button>'

    def test_string_true(self):
        """The string 'true' expands too."""
        tag = Input.create().id('email').add_aria_attribute('describedby', 'true')
        assert tag.render() == '<input id="email" aria-describedby="email-help">'

    def test_custom_suffix(self):
        """The suffix is configurable."""
        tag = (
            Button.create()
            .id('button')
            .add_aria_attribute('describedby', True)
            .aria_describedby_suffix('value')
        )
        assert tag.get_attributes()['aria-describedby'] is True
        assert tag.resolved_attributes()['aria-describedby'] == 'button-value'

    def test_without_id(self):
        """Without an id the attribute is dropped."""
        assert Button.create().add_aria_attribute('describedby', True).render() == '<button></button>'

    def test_explicit_value_kept(self):
        """Explicit ids are not rewritten."""
        tag = TextArea.create().id('bio').add_aria_attribute('describedby', 'bio-hint')
        assert tag.render() == '<textarea id="bio" aria-describedby="bio-hint"></textarea>'

    def test_id_from_defaults(self):
        """The id can come from any attribute layer."""
        Button.set_global_defaults({'id': 'global'})
        tag = Button.create().add_aria_attribute('describedby', True)
        assert tag.render() == '<button id="global" aria-describedby="global-help"></button>'


class TestInput:
    """Tests for <input> and its presets."""

    def test_void(self):
        """Input is void."""
        assert Input.create().name('q').render() == '<input name="q">'

    def test_type(self):
        """type is validated against the input types."""
        assert Input.create().type(InputType.EMAIL).render() == '<input type="email">'
        with pytest.raises(ValueNotInAllowedSet):
            Input.create().type('bogus')

    def test_preset_type_first(self):
        """Presets put type before create() attributes."""
        tag = InputCheckbox.create({'id': 'agree'}).checked()
        assert tag.render() == '<input type="checkbox" id="agree" checked>'

    def test_preset_overridden_by_create(self):
        """A type given to create() wins over the preset."""
        assert InputText.create({'type': 'search'}).render() == '<input type="search">'

    def test_text_attributes(self):
        """Text control attributes."""
        tag = (
            InputEmail.create()
            .name('email')
            .placeholder('you@example.com')
            .required()
            .maxlength(80)
            .autocomplete(False)
        )
        assert tag.render() == (
            '<input type="email" name="email" placeholder="you@example.com" '
            'required maxlength="80" autocomplete="off">'
        )

    def test_length_range(self):
        """Negative lengths are rejected."""
        with pytest.raises(AttributeInvalidValue):
            Input.create().maxlength(-1)

    def test_numeric_bounds(self):
        """min, max and step."""
        tag = Input.create().type('number').min(0).max(10).step(2)
        assert tag.get_attributes() == {'type': 'number', 'min': 0, 'max': 10, 'step': 2}

    def test_accept_list(self):
        """accept lists are joined with commas."""
        tag = Input.create().type('file').accept(['image/*', '.pdf']).multiple()
        assert tag.render() == '<input type="file" accept="image/*,.pdf" multiple>'


class TestChoiceInput:
    """Tests for checkbox and radio labels and unchecked values."""

    def test_label_after_control(self):
        """The label follows the control, bound to its id."""
        tag = InputCheckbox.create({'id': 'agree'}).label('I agree')
        assert tag.render() == '<input type="checkbox" id="agree">\n<label for="agree">I agree</label>'

    def test_label_escaped(self):
        """Label text is escaped."""
        tag = InputRadio.create({'id': 'r'}).label('<b>')
        assert tag.render() == '<input type="radio" id="r">\n<label for="r">&lt;b&gt;</label>'

    def test_label_attributes(self):
        """Label attributes render on the label; an explicit for wins."""
        tag = (
            InputCheckbox.create({'id': 'a'})
            .label('A')
            .label_attributes({'class_': 'form-label', 'for': 'other'})
        )
        assert tag.render() == (
            '<input type="checkbox" id="a">\n<label class="form-label" for="other">A</label>'
        )

    def test_label_without_id(self):
        """Without an id the label has no for attribute."""
        tag = InputRadio.create().value('1').label('One')
        assert tag.render() == '<input type="radio" value="1">\n<label>One</label>'

    def test_enclosed_by_label(self):
        """enclosed_by_label() wraps the control in the label."""
        tag = InputCheckbox.create({'id': 'a'}).label('Accept').enclosed_by_label()
        assert tag.render() == (
            '<label for="a">\n<input type="checkbox" id="a">\nAccept\n</label>'
        )

    def test_label_dropped(self):
        """None drops a previously set label."""
        tag = InputCheckbox.create({'id': 'a'}).label('A').label(None)
        assert tag.render() == '<input type="checkbox" id="a">'

    def test_unchecked_value(self):
        """A hidden input with the same name precedes the control."""
        tag = InputCheckbox.create({'name': 'news'}).value('yes').unchecked_value('no')
        assert tag.render() == (
            '<input type="hidden" name="news" value="no">\n'
            '<input type="checkbox" name="news" value="yes">'
        )

    def test_unchecked_bool(self):
        """Boolean unchecked values are submitted as 1/0."""
        tag = InputCheckbox.create({'name': 'n'}).unchecked_value(False)
        assert tag.render() == '<input type="hidden" name="n" value="0">\n<input type="checkbox" name="n">'

    def test_unchecked_outside_label(self):
        """The hidden input stays outside an enclosing label, prefix and suffix outermost."""
        tag = (
            InputCheckbox.create({'id': 'a', 'name': 'a'})
            .unchecked_value(0)
            .label('A')
            .enclosed_by_label()
            .prefix('<div>')
            .suffix('</div>')
        )
        assert tag.render() == (
            '<div>\n'
            '<input type="hidden" name="a" value="0">\n'
            '<label for="a">\n<input type="checkbox" id="a" name="a">\nA\n</label>\n'
            '</div>'
        )

    def test_receiver_unchanged(self):
        """Label and unchecked value return new tags."""
        tag = InputCheckbox.create({'id': 'a'})
        tag.label('A').unchecked_value('0')
        assert tag.render() == '<input type="checkbox" id="a">'


class TestTextArea:
    """Tests for <textarea>."""

    def test_content_is_escaped_inline(self):
        """Content is the escaped initial value."""
        tag = TextArea.create().name('bio').content('<b>')
        assert tag.render() == '<textarea name="bio">&lt;b&gt;</textarea>'

    def test_cols_rows(self):
        """cols and rows must be positive."""
        tag = TextArea.create().cols(40).rows('3')
        assert tag.render() == '<textarea cols="40" rows="3"></textarea>'

    def test_cols_invalid(self):
        """Zero columns are rejected with the constraint in the message."""
        with pytest.raises(AttributeInvalidValue) as exc_info:
            TextArea.create().cols(0)
        assert str(exc_info.value) == (
            '`0` is an invalid value for `cols`. The value must satisfy: `value > 0`.'
        )

    def test_wrap(self):
        """wrap accepts hard, off and soft."""
        assert TextArea.create().wrap(Wrap.HARD).get_attribute('wrap') == 'hard'
        with pytest.raises(ValueNotInAllowedSet):
            TextArea.create().wrap('none')


class TestForm:
    """Tests for <form>."""

    def test_render(self):
        """Form is a block element."""
        tag = Form.create().action('/save').method('post')
        assert tag.render() == '<form action="/save" method="post">\n</form>'

    def test_method_invalid(self):
        """Only dialog, get and post are valid methods."""
        with pytest.raises(ValueNotInAllowedSet):
            Form.create().method('put')

    def test_enctype(self):
        """enctype accepts the form encodings."""
        tag = Form.create().enctype('multipart/form-data').novalidate().accept_charset('utf-8')
        assert tag.get_attributes() == {
            'enctype': 'multipart/form-data',
            'novalidate': True,
            'accept-charset': 'utf-8',
        }
        with pytest.raises(ValueNotInAllowedSet):
            Form.create().enctype('application/json')

    def test_children(self):
        """Controls are appended as children."""
        tag = Form.create().append_child(InputText.create().name('q')).append_child(
            Button.create().type('submit').content('Go')
        )
        assert tag.render() == (
            '<form>\n<input type="text" name="q">\n<button type="submit">Go</button>\n</form>'
        )
