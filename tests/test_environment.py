from unittest import mock

from dsdrills.environment import describe, main


def test_describe_lists_arguments_and_environment():
    text = describe(["prog", "one", "two"], {"HOME": "/home/demo", "LANG": "C"})
    assert text.splitlines() == [
        "The number of arguments 'argc'=: 3",
        "The arguments are: ",
        "argv[0]=prog",
        "argv[1]=one",
        "argv[2]=two",
        "The environment variables are: ",
        "envp[0]=HOME=/home/demo",
        "envp[1]=LANG=C",
    ]


def test_describe_with_empty_environment():
    lines = describe(["prog"], {}).splitlines()
    assert lines[-1] == "The environment variables are: "
    assert lines[0] == "The number of arguments 'argc'=: 1"


def test_describe_counts_every_entry():
    environ = {f"VAR{i}": str(i) for i in range(5)}
    lines = describe(["a", "b"], environ).splitlines()
    assert sum(line.startswith("envp[") for line in lines) == len(environ)
    assert sum(line.startswith("argv[") for line in lines) == 2


def test_main_prints_given_arguments(capsys):
    with mock.patch.dict("os.environ", {"DEMO_SETTING": "on"}, clear=True):
        status = main(["tool", "--flag"])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out[0] == "The number of arguments 'argc'=: 2"
    assert "argv[1]=--flag" in out
    assert "envp[0]=DEMO_SETTING=on" in out


def test_main_defaults_to_sys_argv(capsys):
    with mock.patch("sys.argv", ["runner", "x"]):
        main()
    out = capsys.readouterr().out.splitlines()
    assert out[2] == "argv[0]=runner"
    assert out[3] == "argv[1]=x"