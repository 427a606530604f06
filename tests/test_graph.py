from fluxor.graph import Action, Task, Template, Transition
from fluxor.parameters import Parameter, Parameters


def _sample():
    return Task(
        id="root",
        name="root",
        namespace="ns",
        when="x > 1",
        async_=True,
        init=Parameters([Parameter(name="i", value=1)]),
        action=Action(service="printer", method="print", input={"message": "hi"}),
        depends_on=["other"],
        tasks=[Task(id="child", name="child")],
        post=Parameters([Parameter(name="o", value=2)]),
        template=Template(task=Task(id="tpl"), selector=Parameters()),
        goto=[Transition(when="ok", task="child")],
    )


def test_is_async_follows_flag():
    assert Task(async_=True).is_async() is True
    assert Task().is_async() is False


def test_is_auto_pause_defaults_false():
    assert Task().is_auto_pause() is False
    assert Task(auto_pause=True).is_auto_pause() is True
    assert Task(auto_pause=False).is_auto_pause() is False


def test_clone_equals_original_for_copied_fields():
    original = _sample()
    copy = original.clone()
    assert copy == original


def test_clone_is_independent():
    original = _sample()
    copy = original.clone()
    copy.tasks[0].name = "changed"
    copy.depends_on.append("extra")
    copy.goto[0].task = "elsewhere"
    copy.action.method = "other"
    copy.template.task.id = "other"
    assert original.tasks[0].name == "child"
    assert original.depends_on == ["other"]
    assert original.goto[0].task == "child"
    assert original.action.method == "print"
    assert original.template.task.id == "tpl"


def test_clone_shares_template_selector():
    original = _sample()
    assert original.clone().template.selector is original.template.selector


def test_from_dict_parses_nested_structure():
    data = {
        "id": "main",
        "name": "main",
        "when": "ready",
        "async": True,
        "autoPause": True,
        "dependsOn": ["setup"],
        "init": [{"name": "count", "value": 3, "dataType": "int"}],
        "post": {"done": True},
        "action": {"service": "printer", "method": "print", "input": {"message": "$count"}},
        "tasks": [{"id": "sub", "name": "sub"}],
        "goto": [{"when": "count > 2", "task": "sub"}],
        "template": {"task": {"id": "tpl"}, "selector": [{"name": "item", "value": "$items"}]},
    }
    task = Task.from_dict(data)
    assert task.id == "main"
    assert task.is_async() and task.is_auto_pause()
    assert task.depends_on == ["setup"]
    assert task.init.get("count").data_type == "int"
    assert task.init.to_dict() == {"count": 3}
    assert task.post.to_dict() == {"done": True}
    assert task.action == Action(service="printer", method="print", input={"message": "$count"})
    assert [sub.id for sub in task.tasks] == ["sub"]
    assert task.goto == [Transition(when="count > 2", task="sub")]
    assert task.template.task.id == "tpl"
    assert task.template.selector.to_dict() == {"item": "$items"}


def test_from_dict_empty_gives_defaults():
    assert Task.from_dict({}) == Task()